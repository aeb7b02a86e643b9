"""Signup form checks.

Each check returns an error message, or an empty string when the value is
acceptable. They are re-run on every rerender of the signup form.
"""
import re

from greenchat.config import ALLOWED_EMAIL_SUFFIX
from greenchat.constants import Messages

MIN_PASSWORD_LENGTH = 8
_DIGIT = re.compile(r"\d")


def validate_password(secret):
    """An empty password is not an error: the user has not typed yet."""
    secret = secret or ""
    if secret and (len(secret) < MIN_PASSWORD_LENGTH or not _DIGIT.search(secret)):
        return Messages.PASSWORD_RULE
    return ""


def validate_email(email, suffix=ALLOWED_EMAIL_SUFFIX):
    if not (email or "").endswith(suffix):
        return Messages.EMAIL_RULE.format(suffix=suffix)
    return ""


def validate_signup(form, username_error=""):
    """Build the error set for a signup form dict.

    ``username_error`` is the backend's last complaint about the username and
    is passed in only while the username is unchanged.
    """
    return {
        "passwordError": validate_password(form.get("secret")),
        "emailError": validate_email(form.get("email")),
        "usernameError": username_error or "",
    }


def has_errors(errors):
    return any(errors.values())


REQUIRED_FIELDS = ("username", "secret", "email", "first_name", "last_name")


def missing_fields(form):
    """Signup fields left blank; every one of them is required."""
    return [field for field in REQUIRED_FIELDS if not (form.get(field) or "").strip()]
