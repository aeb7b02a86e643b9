import logging

import streamlit as st

from greenchat.chat_embed import community_props, direct_messages_props, missing_options, render_chat
from greenchat.session import View

logger = logging.getLogger(__name__)


@st.dialog("Welcome")
def notice_dialog(message):
    st.success(message)


def chat_view(session):
    st.sidebar.success(f"Logged in as {session.username}")

    notice = session.pop_notice()
    if notice:
        notice_dialog(notice)

    community = session.view == View.COMMUNITY
    if community:
        if st.sidebar.button("🏠 Direct Messages"):
            logger.info(f"{session.username} - switching to direct messages")
            session.open_direct_messages()
            st.rerun()
        props = community_props(session.identity)
    else:
        if st.sidebar.button("🏠 Community Chat"):
            logger.info(f"{session.username} - switching to community room")
            session.open_community()
            st.rerun()
        props = direct_messages_props(session.identity)

    st.title(session.title)

    missing = missing_options(props)
    if missing:
        logger.warning(f"Chat widget not mounted, unset options: {missing}")
        st.warning(f"Chat is not configured. Set: {', '.join(missing)}")
    else:
        render_chat(props, community=community)

    if st.sidebar.button("Logout"):
        logger.info(f"{session.username} - User logged out")
        session.logout()
        st.rerun()
