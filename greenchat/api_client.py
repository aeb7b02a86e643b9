import logging

import requests

from greenchat.config import BACKEND_URL, SECONDARY_BACKEND_URL
from greenchat.constants import ErrorKinds, Messages, ResponseFields, ResponseStatus

logger = logging.getLogger(__name__)


def success(**fields):
    return {ResponseFields.STATUS: ResponseStatus.SUCCESS, **fields}


def failure(kind, message):
    return {
        ResponseFields.STATUS: ResponseStatus.ERROR,
        ResponseFields.ERROR: kind,
        ResponseFields.MESSAGE: message,
    }


class BackendClient:
    """Talks to the REST backend for authentication and user management.

    Every public method sends exactly one request and returns a response dict
    with a ``status`` key. Network and HTTP failures never escape; they come
    back as ``error`` responses carrying an ``error`` kind and a ``message``.
    """

    def __init__(self, base_url=BACKEND_URL, secondary_url=SECONDARY_BACKEND_URL, session=None):
        self.base_url = base_url.rstrip("/")
        self.secondary_url = (secondary_url or "").rstrip("/")
        self.session = session or requests.Session()

    def _url(self, path, base=None):
        return f"{base or self.base_url}{path}"

    @staticmethod
    def _succeeded(response):
        return 200 <= response.status_code < 300

    @staticmethod
    def _json_object(response):
        """Decode a response body, returning None unless it is a non-empty object."""
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body:
            return body
        return None

    def login(self, username, secret):
        """Log in; the identity keeps the secret since the server does not echo it."""
        logger.info(f"Login request for username: {username}")
        try:
            response = self.session.post(self._url("/login"), json={"username": username, "secret": secret})
        except requests.RequestException as e:
            logger.error(f"Login request for {username} failed: {e}")
            return failure(ErrorKinds.INVALID_CREDENTIALS, Messages.INVALID_CREDENTIALS)

        if response.status_code == 401:
            logger.warning(f"Login refused for unverified account: {username}")
            return failure(ErrorKinds.ACCOUNT_NOT_VERIFIED, Messages.ACCOUNT_NOT_VERIFIED)

        body = self._json_object(response) if self._succeeded(response) else None
        if body is None:
            logger.warning(f"Login failed for {username} with status {response.status_code}")
            return failure(ErrorKinds.INVALID_CREDENTIALS, Messages.INVALID_CREDENTIALS)

        return success(identity={**body, "secret": secret})

    def signup(self, username, secret, email, first_name, last_name):
        logger.info(f"Signup request for username: {username}")
        payload = {
            "username": username,
            "secret": secret,
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
        }
        try:
            response = self.session.post(self._url("/signup"), json=payload)
        except requests.RequestException as e:
            logger.error(f"Signup request for {username} got no response: {e}")
            return failure(ErrorKinds.NETWORK_OR_SERVER, Messages.SIGNUP_UNREACHABLE)

        if not self._succeeded(response):
            logger.warning(f"Signup rejected for {username} with status {response.status_code}")
            return failure(ErrorKinds.USERNAME_TAKEN, Messages.USERNAME_TAKEN)

        body = self._json_object(response)
        if body is None:
            logger.error(f"Signup for {username} returned an unreadable body")
            return failure(ErrorKinds.NETWORK_OR_SERVER, Messages.SIGNUP_UNREACHABLE)

        return success(identity={**body, "secret": secret}, message=Messages.SIGNUP_SUCCESS)

    def list_users(self):
        try:
            response = self.session.get(self._url("/users"))
            response.raise_for_status()
            users = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error fetching users: {e}")
            return failure(ErrorKinds.NETWORK_OR_SERVER, Messages.USERS_UNAVAILABLE)

        if not isinstance(users, list):
            logger.error(f"Unexpected user list payload: {type(users).__name__}")
            return failure(ErrorKinds.NETWORK_OR_SERVER, Messages.USERS_UNAVAILABLE)
        return success(users=users)

    def _delete(self, url):
        try:
            response = self.session.delete(url)
        except requests.RequestException as e:
            logger.error(f"Error deleting {url}: {e}")
            return failure(ErrorKinds.NETWORK_OR_SERVER, Messages.DELETE_FAILED)

        if response.status_code != 200:
            logger.error(f"Failed to delete {url}: status {response.status_code}")
            return failure(ErrorKinds.NETWORK_OR_SERVER, Messages.DELETE_FAILED)
        logger.info(f"Deleted {url}")
        return success()

    def delete_user(self, user_id):
        return self._delete(self._url(f"/users/{user_id}"))

    def delete_mirrored_user(self, user_id):
        if not self.secondary_url:
            return failure(ErrorKinds.NETWORK_OR_SERVER, Messages.MIRROR_NOT_CONFIGURED)
        return self._delete(self._url(f"/other-users/{user_id}", base=self.secondary_url))

    def close(self):
        self.session.close()
