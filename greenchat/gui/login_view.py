import logging

import streamlit as st

from greenchat.constants import ResponseFields, ResponseStatus

logger = logging.getLogger(__name__)


def login_view(session, client):
    """Handles user login UI."""
    st.subheader("Login")
    username = st.text_input("Username", key="login_username")
    secret = st.text_input("Password", type="password", key="login_secret")

    if st.button("LOG IN", type="primary"):
        logger.info(f"Login attempt for username: {username}")
        response = client.login(username, secret)

        if response.get(ResponseFields.STATUS) == ResponseStatus.SUCCESS:
            logger.info(f"Successful login for user: {username}")
            session.authenticate(response[ResponseFields.IDENTITY])
            st.rerun()
        else:
            logger.warning(f"Failed login attempt for user: {username} ({response.get(ResponseFields.ERROR)})")
            st.error(response.get(ResponseFields.MESSAGE))

    st.write("Don't have an account?")
    if st.button("Sign Up", key="to_signup"):
        session.toggle_signup()
        st.rerun()
