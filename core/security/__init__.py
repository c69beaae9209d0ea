"""
Security helpers for TalentLink Accounts.

Provides:
- Password hashing (bcrypt)
"""

from .passwords import hash_password, verify_password

__all__ = ["hash_password", "verify_password"]
