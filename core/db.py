"""
Database engine and session handling for the account store.

One process-wide ``DatabaseManager`` (``db``) owns the engine. The API
initializes it during startup; route handlers receive sessions through the
``get_db`` dependency, which commits when the request succeeds and rolls
back when it raises.

    from core.db import db

    db.initialize()
    with db.session() as session:
        account = session.get(UserAccount, account_id)
"""

import time
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .config import get_settings


class Base(DeclarativeBase):
    """Declarative base for account tables."""


def _engine_options(url: str) -> dict[str, Any]:
    # SQLite (tests, local dev) shares one connection across threads;
    # server databases get a sized pool from settings.
    if url.startswith("sqlite"):
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }

    settings = get_settings()
    return {
        "poolclass": QueuePool,
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": settings.db_pool_pre_ping,
    }


class DatabaseManager:
    """Process-wide holder of the engine and session factory."""

    _instance: Optional["DatabaseManager"] = None

    def __new__(cls) -> "DatabaseManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.engine = None
            cls._instance.SessionLocal = None
        return cls._instance

    engine: Engine | None
    SessionLocal: sessionmaker | None

    @property
    def is_initialized(self) -> bool:
        return self.engine is not None

    def initialize(self, database_url: str | None = None) -> None:
        """Create the engine once; later calls are no-ops."""
        if self.is_initialized:
            return

        url = database_url or get_settings().database_url
        self.engine = create_engine(url, echo=get_settings().debug, **_engine_options(url))
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
        )

    def create_all_tables(self) -> None:
        """Create any missing account tables. Migrations remain the source of truth."""
        engine = self._require_engine()
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Yield a session that commits on success and rolls back on error."""
        self._require_engine()
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def health_check(self) -> dict:
        """
        Run ``SELECT 1`` against the database.

        Returns:
            dict with 'healthy' (bool), 'latency_ms' (float), and 'error' (str or None)
        """
        if not self.is_initialized:
            return {"healthy": False, "latency_ms": 0, "error": "Database not initialized"}

        start = time.perf_counter()
        error = None
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as exc:
            error = str(exc)
        latency = round((time.perf_counter() - start) * 1000, 2)
        return {"healthy": error is None, "latency_ms": latency, "error": error}

    def _require_engine(self) -> Engine:
        if self.engine is None:
            raise RuntimeError("DatabaseManager not initialized. Call initialize() first.")
        return self.engine


db = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency: one session per request."""
    with db.session() as session:
        yield session


__all__ = ["Base", "DatabaseManager", "db", "get_db"]
