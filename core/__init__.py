"""
TalentLink Accounts core library.

Database management, the account model, repositories, password hashing,
configuration and logging shared by the API and migrations.

Usage:
    # Database
    from core.db import db, get_db
    from core.models import UserAccount
    from core.repositories import UserRepository

    # Config
    from core.config import get_settings, Settings

    # Logging
    from core.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"
