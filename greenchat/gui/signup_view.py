import logging

import streamlit as st

from greenchat.constants import ErrorKinds, Messages, ResponseFields, ResponseStatus
from greenchat.validators import has_errors, missing_fields, validate_signup

logger = logging.getLogger(__name__)


def _username_error(username):
    """The backend's last complaint, dropped once the username is edited."""
    rejected = st.session_state.get("signup_rejected")
    if rejected and rejected[0] == username:
        return rejected[1]
    st.session_state.pop("signup_rejected", None)
    return ""


def _submit(session, client, form, errors):
    logger.info(f"Signup attempt for username: {form['username']}")

    missing = missing_fields(form)
    if missing:
        logger.warning(f"Signup blocked, missing fields: {missing}")
        st.error(Messages.REQUIRED_FIELDS)
        return

    if has_errors(errors):
        logger.warning(f"Signup blocked by validation for username: {form['username']}")
        return

    response = client.signup(**form)
    if response.get(ResponseFields.STATUS) == ResponseStatus.SUCCESS:
        logger.info(f"Successfully created account for username: {form['username']}")
        session.authenticate(response[ResponseFields.IDENTITY], notice=response.get(ResponseFields.MESSAGE))
        st.rerun()
    else:
        logger.error(f"Failed to create account for {form['username']}: {response.get(ResponseFields.ERROR)}")
        if response.get(ResponseFields.ERROR) == ErrorKinds.USERNAME_TAKEN:
            st.session_state.signup_rejected = (form["username"], response.get(ResponseFields.MESSAGE))
        st.error(response.get(ResponseFields.MESSAGE))


def signup_view(session, client):
    """Handles user sign-up UI."""
    st.subheader("Sign Up")

    form = {
        "username": st.text_input("Username", key="signup_username"),
        "secret": st.text_input("Password", type="password", key="signup_secret"),
        "email": st.text_input("Email", key="signup_email"),
        "first_name": st.text_input("First Name", key="signup_first_name"),
        "last_name": st.text_input("Last Name", key="signup_last_name"),
    }
    errors = validate_signup(form, _username_error(form["username"]))

    if errors["usernameError"]:
        st.error(errors["usernameError"])
    if errors["passwordError"]:
        st.error(errors["passwordError"])
    # an empty email is reported as a missing field on submit instead
    if errors["emailError"] and form["email"]:
        st.error(errors["emailError"])

    if st.button("SIGN UP", type="primary"):
        _submit(session, client, form, errors)

    st.write("Already have an account?")
    if st.button("Log In", key="to_login"):
        session.toggle_signup()
        st.rerun()
