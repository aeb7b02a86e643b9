class ResponseStatus:
    SUCCESS = "success"
    ERROR = "error"
    PARTIAL = "partial"

class ResponseFields:
    STATUS = "status"
    MESSAGE = "message"
    ERROR = "error"
    IDENTITY = "identity"
    USERS = "users"

class ErrorKinds:
    INVALID_CREDENTIALS = "InvalidCredentials"
    ACCOUNT_NOT_VERIFIED = "AccountNotVerified"
    USERNAME_TAKEN = "UsernameTaken"
    VALIDATION_FAILED = "ValidationFailed"
    NETWORK_OR_SERVER = "NetworkOrServerError"

class Messages:
    ACCOUNT_NOT_VERIFIED = "Account not verified. Please check your email for verification link."
    INVALID_CREDENTIALS = "Invalid username or password."
    USERNAME_TAKEN = "Username already exists"
    SIGNUP_SUCCESS = "Sign up successful! Please check your email to verify your account."
    SIGNUP_UNREACHABLE = "Could not reach the server. Please try again."
    PASSWORD_RULE = "Password must be at least 8 characters long and include at least one numerical value"
    EMAIL_RULE = "Email must be from a {suffix} domain"
    REQUIRED_FIELDS = "Please fill in all fields."
    USERS_UNAVAILABLE = "Could not load the user list."
    DELETE_FAILED = "Failed to delete user."
    DELETE_PROTECTED = "The admin account cannot be deleted."
    DELETE_UNKNOWN = "Unknown user."
    MIRROR_NOT_CONFIGURED = "No secondary backend is configured."
    MIRROR_DELETE_FAILED = "User deleted on the primary backend but not on the secondary backend ({url})."

# username exempt from deletion in the admin list
PROTECTED_USERNAME = "admin"
