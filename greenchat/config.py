"""Runtime configuration, read from environment variables.

Every value the front end needs from the outside world lives here. Nothing
else in the package reads the environment.
"""
import os

BACKEND_URL = os.environ.get("GREENCHAT_BACKEND_URL", "https://chat-app-v84a.onrender.com").rstrip("/")
SECONDARY_BACKEND_URL = os.environ.get("GREENCHAT_SECONDARY_BACKEND_URL", "").rstrip("/")
CHAT_PROJECT_ID = os.environ.get("GREENCHAT_CHAT_PROJECT_ID", "")
COMMUNITY_CHAT_ID = os.environ.get("GREENCHAT_COMMUNITY_CHAT_ID", "")
COMMUNITY_CHAT_ACCESS_KEY = os.environ.get("GREENCHAT_COMMUNITY_CHAT_ACCESS_KEY", "")
ALLOWED_EMAIL_SUFFIX = os.environ.get("GREENCHAT_ALLOWED_EMAIL_SUFFIX", "greenriver.edu")
LOG_LEVEL = os.environ.get("GREENCHAT_LOG_LEVEL", "INFO").upper()

# env var -> (module attribute, description)
OPTIONS = {
    "GREENCHAT_BACKEND_URL": ("BACKEND_URL", "Base URL of the REST backend (login, signup, users)"),
    "GREENCHAT_SECONDARY_BACKEND_URL": ("SECONDARY_BACKEND_URL", "Optional backend mirrored on user deletion"),
    "GREENCHAT_CHAT_PROJECT_ID": ("CHAT_PROJECT_ID", "Hosted chat service project ID"),
    "GREENCHAT_COMMUNITY_CHAT_ID": ("COMMUNITY_CHAT_ID", "Chat ID of the community room"),
    "GREENCHAT_COMMUNITY_CHAT_ACCESS_KEY": ("COMMUNITY_CHAT_ACCESS_KEY", "Access key of the community room"),
    "GREENCHAT_ALLOWED_EMAIL_SUFFIX": ("ALLOWED_EMAIL_SUFFIX", "Email suffix required at signup"),
    "GREENCHAT_LOG_LEVEL": ("LOG_LEVEL", "Logging level"),
}

SECRET_OPTIONS = {"GREENCHAT_COMMUNITY_CHAT_ACCESS_KEY"}


def describe_options():
    """Return ``(env var, value)`` pairs for every option, secrets masked."""
    described = []
    for name, (attribute, _) in OPTIONS.items():
        value = globals()[attribute]
        if name in SECRET_OPTIONS and value:
            value = "****"
        described.append((name, value or "<unset>"))
    return described
