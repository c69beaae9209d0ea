"""
SQLAlchemy models for TalentLink Accounts.

Usage:
    from core.models import UserAccount, UserType
"""

from core.db import Base

from .user import UserAccount, UserType, generate_account_id

__all__ = [
    "Base",
    "UserAccount",
    "UserType",
    "generate_account_id",
]
