"""
Repository pattern implementations for data access.

Repositories provide a clean abstraction over database operations.

Usage:
    from core.repositories import UserRepository
    from core.db import db

    with db.session() as session:
        repo = UserRepository(session)
        user = repo.get_by_email("jane@example.com")
"""

from .base import BaseRepository
from .user_repository import UserRepository, normalize_email

__all__ = [
    "BaseRepository",
    "UserRepository",
    "normalize_email",
]
