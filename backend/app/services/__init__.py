"""
Backend services for TalentLink Accounts.
"""

from . import auth_service

__all__ = ["auth_service"]
