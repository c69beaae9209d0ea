"""
Application configuration using Pydantic settings.

Usage:
    from core.config import get_settings
    settings = get_settings()

For constants, import from core.constants:
    from core.constants import MSG_USER_EXISTS, TOKEN_COOKIE_NAME
"""

import os
import warnings
from functools import lru_cache
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import FORBIDDEN_JWT_SECRETS, MIN_JWT_SECRET_LENGTH, TOKEN_COOKIE_NAME


def _is_production_env(env: str) -> bool:
    return env.lower() in ("production", "prod")


class Settings(BaseSettings):
    """
    Unified application settings loaded from environment variables and .env file.

    Required for production:
        - JWT_SECRET_KEY (min 32 chars)
        - DATABASE_URL
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # App settings
    app_name: str = "TalentLink Accounts"
    api_prefix: str = Field(default="/api", validation_alias="API_PREFIX")
    debug: bool = Field(default=False, validation_alias="DEBUG")
    env: str = Field(default="development", validation_alias="ENV")

    # Database
    database_url: str = Field(default="sqlite:///talentlink.db", validation_alias="DATABASE_URL")
    db_pool_size: int = Field(default=10, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=20, validation_alias="DB_MAX_OVERFLOW")
    db_pool_pre_ping: bool = Field(default=True, validation_alias="DB_POOL_PRE_PING")

    # JWT / session
    jwt_secret_key: str = Field(default="CHANGE_ME", validation_alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    # The signed token and the cookie carrying it expire independently.
    session_token_expire_days: int = Field(default=3, validation_alias="SESSION_TOKEN_EXPIRE_DAYS")
    session_cookie_expire_hours: int = Field(default=8, validation_alias="SESSION_COOKIE_EXPIRE_HOURS")
    session_cookie_name: str = Field(default=TOKEN_COOKIE_NAME, validation_alias="SESSION_COOKIE_NAME")
    session_cookie_secure: bool | None = Field(default=None, validation_alias="SESSION_COOKIE_SECURE")
    session_cookie_samesite: Literal["lax", "strict", "none"] = Field(
        default="strict", validation_alias="SESSION_COOKIE_SAMESITE"
    )

    # Password hashing
    bcrypt_rounds: int = Field(default=12, ge=4, le=31, validation_alias="BCRYPT_ROUNDS")

    # CORS
    cors_allowed_origins: str = Field(default="http://localhost:5173", validation_alias="CORS_ALLOWED_ORIGINS")

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        """Validate JWT secret - warns in dev, errors in production."""
        is_production = _is_production_env(os.getenv("ENV", "development"))

        is_forbidden = v.lower() in FORBIDDEN_JWT_SECRETS
        is_too_short = len(v) < MIN_JWT_SECRET_LENGTH

        if is_production:
            if is_forbidden:
                raise ValueError(
                    f"JWT_SECRET_KEY cannot be a default value ('{v}') in production. "
                    "Generate a secure key with: python -c \"import secrets; print(secrets.token_urlsafe(48))\""
                )
            if is_too_short:
                raise ValueError(
                    f"JWT_SECRET_KEY must be at least {MIN_JWT_SECRET_LENGTH} characters "
                    f"in production (got {len(v)})."
                )
        elif is_forbidden:
            warnings.warn(
                f"JWT_SECRET_KEY is set to a default value ('{v}'). "
                "This is insecure - set a proper key for production.",
                UserWarning,
                stacklevel=2,
            )
        elif is_too_short:
            warnings.warn(
                f"JWT_SECRET_KEY should be at least {MIN_JWT_SECRET_LENGTH} characters (got {len(v)})",
                UserWarning,
                stacklevel=2,
            )

        return v

    @property
    def is_production(self) -> bool:
        return _is_production_env(self.env)

    @property
    def cookie_secure(self) -> bool:
        """Send the session cookie over HTTPS only; defaults to on in production."""
        if self.session_cookie_secure is None:
            return self.is_production
        return self.session_cookie_secure

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    def validate_production_config(self) -> tuple[List[str], List[str]]:
        """
        Validate configuration for production deployment.

        Returns:
            Tuple of (errors, warnings) - errors are fatal, warnings are advisory
        """
        errors = []
        advisories = []

        if self.jwt_secret_key.lower() in FORBIDDEN_JWT_SECRETS:
            errors.append("JWT_SECRET_KEY must be set for production")
        elif len(self.jwt_secret_key) < MIN_JWT_SECRET_LENGTH:
            errors.append(f"JWT_SECRET_KEY must be at least {MIN_JWT_SECRET_LENGTH} characters")

        if self.database_url.startswith("sqlite"):
            advisories.append("DATABASE_URL points at SQLite; use PostgreSQL for production.")

        if self.session_cookie_expire_hours * 3600 < self.session_token_expire_days * 86400:
            advisories.append(
                "Session cookie expires before the token it carries "
                f"({self.session_cookie_expire_hours}h cookie vs {self.session_token_expire_days}d token)."
            )

        if self.is_production and not self.cookie_secure:
            advisories.append("SESSION_COOKIE_SECURE is disabled in production.")

        return errors, advisories


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


__all__ = ["Settings", "get_settings"]
