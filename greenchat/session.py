"""Which screen the visitor sees, and who they are once logged in.

    login <-> signup  --authenticate-->  direct_chat <-> community
       ^                                      |             |
       +---------------- logout --------------+-------------+
"""


class View:
    LOGIN = "login"
    SIGNUP = "signup"
    DIRECT_CHAT = "direct_chat"
    COMMUNITY = "community"

PAGE_TITLES = {
    View.LOGIN: "Login",
    View.SIGNUP: "Sign up",
    View.DIRECT_CHAT: "Direct Messages",
    View.COMMUNITY: "Community Chat",
}

LOGGED_OUT_VIEWS = (View.LOGIN, View.SIGNUP)


class InvalidTransition(Exception):
    def __init__(self, action, view):
        super().__init__(f"Cannot {action} from the {view} view")
        self.action = action
        self.view = view


class ChatSession:
    """In-memory session state machine. Nothing here is persisted."""

    def __init__(self):
        self.view = View.LOGIN
        self.identity = None
        self.notice = None

    @property
    def authenticated(self):
        return self.identity is not None

    @property
    def title(self):
        return PAGE_TITLES[self.view]

    @property
    def username(self):
        return self.identity.get("username") if self.identity else None

    def _require(self, action, *views):
        if self.view not in views:
            raise InvalidTransition(action, self.view)

    def toggle_signup(self):
        self._require("toggle signup", *LOGGED_OUT_VIEWS)
        self.view = View.SIGNUP if self.view == View.LOGIN else View.LOGIN

    def authenticate(self, identity, notice=None):
        self._require("authenticate", *LOGGED_OUT_VIEWS)
        self.identity = identity
        self.notice = notice
        self.view = View.DIRECT_CHAT

    def open_community(self):
        self._require("open the community room", View.DIRECT_CHAT)
        self.view = View.COMMUNITY

    def open_direct_messages(self):
        self._require("open direct messages", View.COMMUNITY)
        self.view = View.DIRECT_CHAT

    def logout(self):
        self._require("log out", View.DIRECT_CHAT, View.COMMUNITY)
        self.identity = None
        self.notice = None
        self.view = View.LOGIN

    def pop_notice(self):
        notice, self.notice = self.notice, None
        return notice
