"""
Authentication router: register, login, logout, token check, current user, profile.

Session tokens travel in an HttpOnly ``token`` cookie. The signed token and
the cookie have separate lifetimes (SESSION_TOKEN_EXPIRE_DAYS and
SESSION_COOKIE_EXPIRE_HOURS).
"""

from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from core.constants import MSG_LOGGED_OUT, MSG_PROFILE_UPDATED, MSG_TOKEN_VALID
from core.logging import get_logger
from core.repositories import UserRepository

from ..auth.dependencies import get_current_claims, get_session_cookie
from ..auth.jwt import TokenClaims, TokenService, get_token_service
from ..config import Settings, get_settings
from ..dependencies import get_user_repository
from ..schemas import (
    LoginRequest,
    MessageResponse,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    RegisterRequest,
    TokenStatusResponse,
    UserProfile,
    UserPublic,
)
from ..services import auth_service

logger = get_logger("auth")

router = APIRouter(prefix="/auth", tags=["auth"])


def _set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    expires = datetime.now(timezone.utc) + timedelta(hours=settings.session_cookie_expire_hours)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        expires=expires,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.session_cookie_samesite,
        path="/",
    )


@router.post("/register", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    users: UserRepository = Depends(get_user_repository),
):
    """Create an account and return its public identity."""
    return auth_service.register_user(users, payload)


@router.post("/login", response_model=UserPublic)
def login(
    response: Response,
    payload: LoginRequest | None = None,
    users: UserRepository = Depends(get_user_repository),
    tokens: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
):
    """
    Log in with email, password and the account type being requested.

    On success the session token is set as the ``token`` cookie and the
    public identity is returned.
    """
    user, token = auth_service.authenticate(users, tokens, payload or LoginRequest())
    _set_session_cookie(response, token, settings)
    return user


@router.get("/me", response_model=UserProfile)
def current_user(
    claims: TokenClaims = Depends(get_current_claims),
    users: UserRepository = Depends(get_user_repository),
):
    """Get the current authenticated user's account, minus the password hash."""
    return auth_service.get_current_user(users, claims.user_id)


@router.post("/logout", response_model=MessageResponse)
def logout(settings: Settings = Depends(get_settings)):
    """Clear the session cookie. Always succeeds."""
    logger.info("logout")
    response = JSONResponse(content={"message": MSG_LOGGED_OUT})
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )
    return response


@router.get("/check-token", response_model=TokenStatusResponse)
def check_token(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
):
    """Report whether the ``token`` cookie holds a valid, unexpired session token."""
    claims = auth_service.check_token(tokens, get_session_cookie(request))
    return {
        "message": MSG_TOKEN_VALID,
        "success": True,
        "userId": claims.user_id,
        "userType": claims.user_type,
    }


@router.put("/profile", response_model=ProfileUpdateResponse)
def update_profile(
    payload: ProfileUpdateRequest,
    claims: TokenClaims = Depends(get_current_claims),
    users: UserRepository = Depends(get_user_repository),
):
    """Update name, skills, bio or profile image; empty values are ignored."""
    user = auth_service.update_profile(users, claims.user_id, payload)
    return {"message": MSG_PROFILE_UPDATED, "user": user}
