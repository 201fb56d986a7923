"""
User repository for database access.

Encapsulates the Supabase queries against the ``users`` table.
"""

from datetime import datetime
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import User

USERS_TABLE = "users"


class UserRepository(BaseRepository[User]):
    """Read access to users plus the login bookkeeping write."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Exact (case-sensitive) lookup by email."""
        rows = self._execute(
            "get user by email",
            self._db.table(USERS_TABLE).select("*").eq("email", email).limit(1),
        )
        return self._map_to_user(rows[0]) if rows else None

    def get_by_id(self, user_id: str) -> Optional[User]:
        rows = self._execute(
            "get user by id",
            self._db.table(USERS_TABLE).select("*").eq("id", user_id).limit(1),
            missing_ok=True,
        )
        return self._map_to_user(rows[0]) if rows else None

    def update_last_login(self, user_id: str, when: datetime) -> None:
        self._execute(
            "update last login",
            self._db.table(USERS_TABLE)
            .update({"last_login": when.isoformat()})
            .eq("id", user_id),
        )

    def _map_to_user(self, data: dict[str, Any]) -> User:
        return User(
            id=str(data["id"]),
            email=data["email"],
            first_name=data.get("first_name") or "",
            last_name=data.get("last_name") or "",
            password_hash=data.get("password_hash") or "",
            last_login=data.get("last_login"),
        )
