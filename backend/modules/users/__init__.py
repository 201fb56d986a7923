"""
Users module.

Holds user records: lookup by email or id and last-login bookkeeping.

Public API:
- User: Stored user record
- UserRepository: Supabase access to the users table
"""

from .models import User
from .repository import UserRepository

__all__ = [
    "User",
    "UserRepository",
]
