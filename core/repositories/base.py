"""Base repository class with common lookups."""

from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

from core.db import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """
    Base repository bound to one model and one session.

    Usage:
        class UserRepository(BaseRepository[UserAccount]):
            model = UserAccount

        repo = UserRepository(session)
        user = repo.get_by_id("64f1c2...")
    """

    model: type[T]

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, id: Any) -> T | None:
        """Get a single record by ID."""
        return self.session.get(self.model, id)

    def save(self, instance: T) -> T:
        """Flush pending changes on an already-loaded record."""
        self.session.add(instance)
        self.session.flush()
        return instance

    def exists_where(self, **filters) -> bool:
        """Check if any record exists matching filters."""
        query = self.session.query(self.model)
        for key, value in filters.items():
            if hasattr(self.model, key):
                query = query.filter(getattr(self.model, key) == value)
        result = self.session.query(query.exists()).scalar()
        return bool(result) if result is not None else False
