"""
Database session and base configuration.

Re-exports from the unified core.db module.

For new code, prefer importing directly from core.db:
    from core.db import db, get_db, Base

Note: Database initialization is handled explicitly in main.py startup,
NOT at import time.
"""

from core.db import Base, db, get_db

__all__ = ["Base", "db", "get_db"]
