import streamlit as st

from greenchat.gui.chat_view import chat_view
from greenchat.gui.login_view import login_view
from greenchat.gui.signup_view import signup_view
from greenchat.gui.user_list_view import user_list_view
from greenchat.session import View
from greenchat.utils import announce_configuration, get_backend_client, get_chat_session, get_user_directory

session = get_chat_session()
page = st.session_state.get("page", "Chat")

st.set_page_config(page_title=session.title if page == "Chat" else "User List")
announce_configuration()

st.sidebar.radio("Page", ["Chat", "User List"], key="page")

if page == "User List":
    user_list_view(get_user_directory())
elif not session.authenticated:
    if session.view == View.SIGNUP:
        signup_view(session, get_backend_client())
    else:
        login_view(session, get_backend_client())
else:
    chat_view(session)  # Show only chat after login
