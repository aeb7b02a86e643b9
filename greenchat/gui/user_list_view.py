import logging

import streamlit as st

from greenchat.constants import ResponseFields, ResponseStatus

logger = logging.getLogger(__name__)

COLUMNS = ["ID", "Username", "Email", "First Name", "Last Name", "Delete"]
FIELDS = ["id", "username", "email", "first_name", "last_name"]


def user_list_view(directory):
    st.title("User List")

    refresh = st.button("Refresh")
    if "users_loaded" not in st.session_state or refresh:
        response = directory.refresh()
        st.session_state.users_loaded = True
        if response.get(ResponseFields.STATUS) != ResponseStatus.SUCCESS:
            st.error(response.get(ResponseFields.MESSAGE))

    outcome = st.session_state.pop("delete_outcome", None)
    if outcome:
        if outcome.get(ResponseFields.STATUS) == ResponseStatus.SUCCESS:
            st.success("User deleted successfully")
        elif outcome.get(ResponseFields.STATUS) == ResponseStatus.PARTIAL:
            st.warning(outcome.get(ResponseFields.MESSAGE))
        else:
            st.error(outcome.get(ResponseFields.MESSAGE))

    header = st.columns(len(COLUMNS))
    for col, label in zip(header, COLUMNS):
        col.markdown(f"**{label}**")

    for user in directory.users:
        row = st.columns(len(COLUMNS))
        for col, field in zip(row, FIELDS):
            col.write(user.get(field, ""))
        if directory.can_delete(user) and row[-1].button("Delete", key=f"delete_{user['id']}"):
            logger.info(f"Deleting user {user['id']}")
            st.session_state.delete_outcome = directory.delete(user["id"])
            st.rerun()
