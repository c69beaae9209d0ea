"""
User-related SQLAlchemy models.
"""

import enum
import secrets
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.constants import USER_TYPE_CLIENT, USER_TYPE_FREELANCER

from core.db import Base


def generate_account_id() -> str:
    """Opaque 24-character hex identifier."""
    return secrets.token_hex(12)


class UserType(str, enum.Enum):
    """Account roles a user can register and log in as."""

    FREELANCER = USER_TYPE_FREELANCER
    CLIENT = USER_TYPE_CLIENT


class UserAccount(Base):
    """
    Marketplace account for freelancers and clients.

    Attributes:
        email: Unique, lower-cased login email
        password: bcrypt hash, never the plaintext
        full_name: Display name
        user_type: One of UserType values
        skills: List of skill tags
        bio: Free-text biography
        profile_image: Optional image URL or reference
        money_earned / money_spent: Running totals maintained by the payments side
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=generate_account_id)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password: Mapped[str] = mapped_column(String(255))
    full_name: Mapped[str] = mapped_column(String(255))
    user_type: Mapped[str] = mapped_column(String(32), index=True)
    skills: Mapped[list[str]] = mapped_column(JSON, default=list)
    bio: Mapped[str] = mapped_column(Text, default="")
    profile_image: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    money_earned: Mapped[float] = mapped_column(Float, default=0.0)
    money_spent: Mapped[float] = mapped_column(Float, default=0.0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<UserAccount id={self.id} user_type={self.user_type}>"
