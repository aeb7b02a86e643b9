import logging

from greenchat.api_client import failure
from greenchat.constants import (
    PROTECTED_USERNAME,
    ErrorKinds,
    Messages,
    ResponseFields,
    ResponseStatus,
)

logger = logging.getLogger(__name__)


class UserDirectory:
    """The admin's view of the backend's user collection.

    ``users`` only changes through a full re-fetch; deleting never edits the
    list in place.
    """

    def __init__(self, client):
        self.client = client
        self.users = []

    def refresh(self):
        """Re-fetch the list. On failure the previous list is kept."""
        response = self.client.list_users()
        if response.get(ResponseFields.STATUS) == ResponseStatus.SUCCESS:
            self.users = response[ResponseFields.USERS]
            logger.info(f"Fetched {len(self.users)} users")
        return response

    @staticmethod
    def can_delete(user):
        return user.get("username") != PROTECTED_USERNAME

    def find(self, user_id):
        return next((user for user in self.users if user.get("id") == user_id), None)

    def delete(self, user_id):
        """Delete on the primary backend, then on the mirror when one is configured.

        The mirror is only touched after the primary succeeded. A mirror
        failure yields a ``partial`` response; the primary deletion stands.
        """
        user = self.find(user_id)
        if user is None:
            return failure(ErrorKinds.VALIDATION_FAILED, Messages.DELETE_UNKNOWN)
        if not self.can_delete(user):
            logger.warning(f"Refusing to delete protected user {user_id}")
            return failure(ErrorKinds.VALIDATION_FAILED, Messages.DELETE_PROTECTED)

        response = self.client.delete_user(user_id)
        if response.get(ResponseFields.STATUS) != ResponseStatus.SUCCESS:
            return response

        if self.client.secondary_url:
            mirror = self.client.delete_mirrored_user(user_id)
            if mirror.get(ResponseFields.STATUS) != ResponseStatus.SUCCESS:
                logger.error(f"User {user_id} deleted on primary backend only")
                response = {
                    ResponseFields.STATUS: ResponseStatus.PARTIAL,
                    ResponseFields.ERROR: mirror.get(ResponseFields.ERROR),
                    ResponseFields.MESSAGE: Messages.MIRROR_DELETE_FAILED.format(url=self.client.secondary_url),
                }

        refreshed = self.refresh()
        if response[ResponseFields.STATUS] == ResponseStatus.SUCCESS and refreshed.get(ResponseFields.STATUS) != ResponseStatus.SUCCESS:
            return refreshed
        return response
