import logging

import streamlit as st

from greenchat import config
from greenchat.api_client import BackendClient
from greenchat.session import ChatSession
from greenchat.user_admin import UserDirectory

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level=None):
    logging.basicConfig(level=level or config.LOG_LEVEL, format=LOG_FORMAT)


@st.cache_resource
def announce_configuration():
    """Log the recognized options once per process."""
    configure_logging()
    for name, value in config.describe_options():
        logger.info(f"config {name}={value}")
    return True


def get_backend_client():
    """Retrieve or initialize a backend client for each user session."""
    if "backend_client" not in st.session_state:
        st.session_state.backend_client = BackendClient()
    return st.session_state.backend_client


def get_chat_session():
    if "chat_session" not in st.session_state:
        st.session_state.chat_session = ChatSession()
    return st.session_state.chat_session


def get_user_directory():
    if "user_directory" not in st.session_state:
        st.session_state.user_directory = UserDirectory(get_backend_client())
    return st.session_state.user_directory
