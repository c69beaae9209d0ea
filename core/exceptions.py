"""
Account error taxonomy.

Every failure the account handlers report to a caller is an ``AccountError``
carrying the HTTP status it maps to. Anything else that escapes a handler is
treated as an internal error by ``backend.app.error_handlers``.
"""

from typing import Any

from . import constants


class AccountError(Exception):
    """Base class for client-visible account failures."""

    status_code: int = 400
    default_message: str = constants.MSG_SERVER_ERROR

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(AccountError):
    """Request fields failed validation; ``errors`` lists each problem."""

    status_code = 400
    default_message = constants.MSG_VALIDATION_FAILED

    def __init__(self, errors: list[dict[str, Any]], message: str | None = None):
        super().__init__(message)
        self.errors = errors


class DuplicateAccount(AccountError):
    status_code = 400
    default_message = constants.MSG_USER_EXISTS


class InvalidData(AccountError):
    status_code = 400
    default_message = constants.MSG_INVALID_USER_DATA


class MissingFields(AccountError):
    status_code = 400
    default_message = constants.MSG_MISSING_LOGIN_FIELDS


class InvalidCredentials(AccountError):
    """Unknown email and wrong password both raise this, with the same message."""

    status_code = 401
    default_message = constants.MSG_INVALID_CREDENTIALS


class RoleMismatch(AccountError):
    status_code = 403
    default_message = constants.MSG_ROLE_MISMATCH


class Forbidden(AccountError):
    status_code = 403
    default_message = constants.MSG_NO_TOKEN


class Unauthorized(AccountError):
    status_code = 401
    default_message = constants.MSG_INVALID_TOKEN


class NotFound(AccountError):
    status_code = 404
    default_message = constants.MSG_USER_NOT_FOUND


__all__ = [
    "AccountError",
    "ValidationFailed",
    "DuplicateAccount",
    "InvalidData",
    "MissingFields",
    "InvalidCredentials",
    "RoleMismatch",
    "Forbidden",
    "Unauthorized",
    "NotFound",
]
