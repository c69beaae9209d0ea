"""
FastAPI dependency injection module.

Provides centralized dependencies for:
- Database sessions
- Repositories
- Token service
- Authenticated identity
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from core.repositories import UserRepository

from ..auth.dependencies import get_current_claims
from ..auth.jwt import get_token_service
from ..database import get_db


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get UserRepository instance."""
    return UserRepository(db)


__all__ = [
    "get_current_claims",
    "get_db",
    "get_token_service",
    "get_user_repository",
]
