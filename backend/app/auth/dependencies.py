"""
Authentication dependencies for FastAPI routes.

Supports both:
- HttpOnly ``token`` cookie (for browser-based frontends)
- Bearer token in Authorization header (for API clients)
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.constants import MSG_NOT_AUTHORIZED
from core.exceptions import Unauthorized
from core.logging import bind_context, get_logger

from ..config import get_settings
from .jwt import InvalidTokenError, TokenClaims, TokenService, get_token_service

logger = get_logger("auth.dependencies")

_bearer_scheme = HTTPBearer(auto_error=False)


def get_session_cookie(request: Request) -> str | None:
    """Read the session token cookie, if any."""
    return request.cookies.get(get_settings().session_cookie_name) or None


def get_token_from_request(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> str:
    """
    Extract the session token from the request.

    Checks in order:
    1. ``token`` cookie
    2. Authorization header (Bearer token)
    """
    cookie_token = get_session_cookie(request)
    if cookie_token:
        return cookie_token
    if credentials and credentials.credentials:
        return credentials.credentials
    raise Unauthorized(MSG_NOT_AUTHORIZED)


def get_current_claims(
    token: str = Depends(get_token_from_request),
    token_service: TokenService = Depends(get_token_service),
) -> TokenClaims:
    """
    Resolve the caller's identity from a verified session token.

    Only the token is checked here; handlers decide what a missing account means.
    """
    try:
        claims = token_service.verify(token)
    except InvalidTokenError as exc:
        logger.info("auth_token_rejected", reason=str(exc))
        raise Unauthorized(MSG_NOT_AUTHORIZED) from None

    bind_context(user_id=claims.user_id)
    return claims
