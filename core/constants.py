"""
Application constants for TalentLink Accounts.

Contains account types, session cookie defaults and user-facing messages.
"""

# =============================================================================
# Account Types
# =============================================================================

USER_TYPE_FREELANCER = "freelancer"
USER_TYPE_CLIENT = "client"


# =============================================================================
# Session
# =============================================================================

TOKEN_COOKIE_NAME = "token"

MIN_JWT_SECRET_LENGTH = 32

FORBIDDEN_JWT_SECRETS = frozenset(
    {
        "change_me",
        "changeme",
        "secret",
        "your-secret-key",
        "jwt-secret",
        "supersecret",
        "development",
        "test",
    }
)


# =============================================================================
# Field Limits
# =============================================================================

MIN_PASSWORD_LENGTH = 1
MAX_PASSWORD_LENGTH = 72  # bcrypt ignores bytes past 72
MAX_FULL_NAME_LENGTH = 100
MAX_BIO_LENGTH = 2000
MAX_SKILLS = 50
MAX_SKILL_LENGTH = 50
MAX_PROFILE_IMAGE_LENGTH = 2048


# =============================================================================
# Response Messages
# =============================================================================

MSG_USER_EXISTS = "User already exists"
MSG_INVALID_USER_DATA = "Invalid user data"
MSG_MISSING_LOGIN_FIELDS = "Email, password, and userType are required"
MSG_INVALID_CREDENTIALS = "Invalid email or password"
MSG_ROLE_MISMATCH = "User role not matched"
MSG_NO_TOKEN = "No token provided"
MSG_INVALID_TOKEN = "Invalid or expired token"
MSG_TOKEN_VALID = "Token is valid"
MSG_NOT_AUTHORIZED = "Not authorized"
MSG_USER_NOT_FOUND = "User not found"
MSG_LOGGED_OUT = "Logged out successfully"
MSG_PROFILE_UPDATED = "Profile updated successfully"
MSG_VALIDATION_FAILED = "Validation failed"
MSG_SERVER_ERROR = "Server error"
