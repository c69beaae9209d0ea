"""
Pydantic schemas for request and response validation.

Wire names are camelCase (``fullName``, ``userType``, ``_id``); attributes
stay snake_case. Every model accepts either form on input.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from core.constants import (
    MAX_BIO_LENGTH,
    MAX_FULL_NAME_LENGTH,
    MAX_PASSWORD_LENGTH,
    MAX_PROFILE_IMAGE_LENGTH,
    MAX_SKILL_LENGTH,
    MAX_SKILLS,
    MIN_PASSWORD_LENGTH,
)
from core.models import UserType


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


def _normalize_user_type(value: str) -> str:
    try:
        return UserType(value.strip().lower()).value
    except ValueError:
        allowed = ", ".join(t.value for t in UserType)
        raise ValueError(f"userType must be one of: {allowed}") from None


def _clean_skills(value: list[str] | None) -> list[str] | None:
    if value is None:
        return None
    skills = [skill.strip() for skill in value if isinstance(skill, str) and skill.strip()]
    if len(skills) > MAX_SKILLS:
        raise ValueError(f"at most {MAX_SKILLS} skills are allowed")
    if any(len(skill) > MAX_SKILL_LENGTH for skill in skills):
        raise ValueError(f"each skill must be at most {MAX_SKILL_LENGTH} characters")
    return skills


# =============================================================================
# Requests
# =============================================================================


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH)
    full_name: str = Field(alias="fullName", min_length=1, max_length=MAX_FULL_NAME_LENGTH)
    user_type: str = Field(alias="userType")
    skills: list[str] | None = Field(default=None, max_length=MAX_SKILLS)
    bio: str | None = Field(default=None, max_length=MAX_BIO_LENGTH)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("full_name")
    @classmethod
    def strip_full_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("fullName is required")
        return v

    @field_validator("user_type")
    @classmethod
    def check_user_type(cls, v: str) -> str:
        return _normalize_user_type(v)

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, v: list[str] | None) -> list[str] | None:
        return _clean_skills(v)


class LoginRequest(CamelModel):
    """
    Raw login body.

    Fields are loose so that missing values are reported as one
    "required" error before field validation runs (see ``LoginCredentials``).
    """

    email: Any = None
    password: Any = None
    user_type: Any = Field(default=None, alias="userType")


class LoginCredentials(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=MAX_PASSWORD_LENGTH)
    user_type: str = Field(alias="userType", min_length=1)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("user_type")
    @classmethod
    def strip_user_type(cls, v: str) -> str:
        return v.strip()


class ProfileUpdateRequest(CamelModel):
    """
    Partial profile update.

    ``skills`` is left untyped: a value that is not a list is ignored rather
    than rejected. A list gets the same cleaning and limits as on register.
    """

    full_name: str | None = Field(default=None, alias="fullName", max_length=MAX_FULL_NAME_LENGTH)
    skills: Any = None
    bio: str | None = Field(default=None, max_length=MAX_BIO_LENGTH)
    profile_image: str | None = Field(default=None, alias="profileImage", max_length=MAX_PROFILE_IMAGE_LENGTH)

    @field_validator("full_name")
    @classmethod
    def strip_full_name(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, v: Any) -> Any:
        if isinstance(v, list):
            return _clean_skills(v)
        return v


# =============================================================================
# Responses
# =============================================================================


class UserPublic(CamelModel):
    """Public identity: what register and login return."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    email: str
    full_name: str = Field(alias="fullName")
    user_type: str = Field(alias="userType")


class UserProfile(UserPublic):
    """Full account record minus the password hash."""

    skills: list[str] = Field(default_factory=list)
    bio: str = ""
    profile_image: str | None = Field(default=None, alias="profileImage")
    money_earned: float = Field(default=0.0, alias="moneyEarned")
    money_spent: float = Field(default=0.0, alias="moneySpent")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


class ProfileUpdateResponse(CamelModel):
    message: str
    user: UserProfile


class TokenStatusResponse(CamelModel):
    message: str
    success: bool = True
    user_id: str = Field(alias="userId")
    user_type: str = Field(alias="userType")


class MessageResponse(BaseModel):
    message: str


def validation_errors_to_list(errors: list[dict[str, Any]], location: str = "body") -> list[dict[str, Any]]:
    """
    Flatten pydantic error dicts to ``{type, msg, path, location}`` entries.

    A leading ``body``/``query``/``cookie`` segment in ``loc`` becomes the location.
    """
    items = []
    for error in errors:
        loc = list(error.get("loc", ()))
        where = location
        if loc and loc[0] in ("body", "query", "path", "header", "cookie"):
            where = str(loc.pop(0))
        items.append(
            {
                "type": "field",
                "msg": error.get("msg", "Invalid value"),
                "path": ".".join(str(part) for part in loc),
                "location": where,
            }
        )
    return items
