"""
SQLAlchemy ORM models for the backend.

Re-exports models from the unified core.models package.
"""

from core.models import Base, UserAccount, UserType

__all__ = [
    "Base",
    "UserAccount",
    "UserType",
]
