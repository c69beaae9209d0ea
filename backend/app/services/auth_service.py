"""
Account handler logic: register, login, current user, token check, profile update.

Functions take their collaborators (user repository, token service) as
arguments and raise ``core.exceptions.AccountError`` subclasses; the router
turns results into HTTP responses.
"""

from pydantic import ValidationError

from core.exceptions import (
    DuplicateAccount,
    Forbidden,
    InvalidCredentials,
    InvalidData,
    MissingFields,
    NotFound,
    RoleMismatch,
    Unauthorized,
    ValidationFailed,
)
from core.logging import get_logger, mask_email
from core.models import UserAccount
from core.repositories import UserRepository

from ..auth.jwt import InvalidTokenError, TokenClaims, TokenService
from ..schemas import (
    LoginCredentials,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    validation_errors_to_list,
)

logger = get_logger("auth.service")


def register_user(users: UserRepository, payload: RegisterRequest) -> UserAccount:
    """
    Create an account from a validated registration body.

    Raises:
        DuplicateAccount: An account with this email already exists.
        InvalidData: The store rejected the record.
    """
    if users.email_exists(payload.email):
        logger.info("register_duplicate", email=mask_email(payload.email))
        raise DuplicateAccount()

    user = users.create_user(
        email=payload.email,
        password=payload.password,
        full_name=payload.full_name,
        user_type=payload.user_type,
        skills=payload.skills,
        bio=payload.bio,
    )
    if user is None or not user.id:
        raise InvalidData()

    logger.info("user_registered", user_id=user.id, user_type=user.user_type)
    return user


def _roles_match(stored: str | None, requested: str) -> bool:
    if not stored:
        return False
    return stored.strip().lower() == requested.strip().lower()


def authenticate(
    users: UserRepository,
    tokens: TokenService,
    payload: LoginRequest,
) -> tuple[UserAccount, str]:
    """
    Check credentials and role, then issue a session token.

    Order of checks:
    1. email, password and userType all present (MissingFields)
    2. field validation (ValidationFailed)
    3. account exists and password matches (InvalidCredentials, same for both)
    4. stored role equals requested role, ignoring case (RoleMismatch)

    Returns:
        Tuple of (account, signed token)
    """
    if not payload.email or not payload.password or not payload.user_type:
        raise MissingFields()

    try:
        credentials = LoginCredentials.model_validate(payload.model_dump(by_alias=True))
    except ValidationError as exc:
        raise ValidationFailed(validation_errors_to_list(exc.errors())) from None

    user = users.get_by_email(credentials.email)
    if user is None or not users.check_password(user, credentials.password):
        logger.info("login_failed", email=mask_email(credentials.email))
        raise InvalidCredentials()

    if not _roles_match(user.user_type, credentials.user_type):
        logger.info(
            "login_role_mismatch",
            user_id=user.id,
            requested_type=credentials.user_type,
        )
        raise RoleMismatch()

    token = tokens.create_token(user.id, user.user_type)
    logger.info("login_success", user_id=user.id, user_type=user.user_type)
    return user, token


def get_current_user(users: UserRepository, user_id: str) -> UserAccount:
    """Load the authenticated caller's account."""
    user = users.get_by_id(user_id)
    if user is None:
        raise NotFound()
    return user


def check_token(tokens: TokenService, token: str | None) -> TokenClaims:
    """
    Verify a session token without consulting the user store.

    Raises:
        Forbidden: No token supplied.
        Unauthorized: Bad signature or expired.
    """
    if not token:
        raise Forbidden()
    try:
        return tokens.verify(token)
    except InvalidTokenError as exc:
        logger.info("token_check_failed", reason=str(exc))
        raise Unauthorized() from None


def _non_empty_str(value: str | None) -> str | None:
    return value if isinstance(value, str) and value else None


def update_profile(
    users: UserRepository,
    user_id: str,
    payload: ProfileUpdateRequest,
) -> UserAccount:
    """
    Apply a partial profile update.

    A field is written only when it was sent and is non-empty; an empty
    string or empty list leaves the stored value as it is. ``skills`` must
    also be a list.
    """
    user = users.get_by_id(user_id)
    if user is None:
        raise NotFound()

    sent = payload.model_fields_set

    full_name = _non_empty_str(payload.full_name) if "full_name" in sent else None
    bio = _non_empty_str(payload.bio) if "bio" in sent else None
    profile_image = _non_empty_str(payload.profile_image) if "profile_image" in sent else None

    # skills arrive cleaned and within limits when they are a list
    skills = None
    if "skills" in sent and isinstance(payload.skills, list):
        skills = payload.skills or None

    user = users.update_profile(
        user,
        full_name=full_name,
        skills=skills,
        bio=bio,
        profile_image=profile_image,
    )

    changed = [
        name
        for name, value in (
            ("full_name", full_name),
            ("skills", skills),
            ("bio", bio),
            ("profile_image", profile_image),
        )
        if value is not None
    ]
    logger.info("profile_updated", user_id=user.id, fields=changed)
    return user
