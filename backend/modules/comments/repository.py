"""
Comment repository for database access.

Story comments and writing comments live in separate tables, each with a
foreign key to its target; the ContentKind of the target selects both.
"""

from typing import Any, Optional

from supabase import Client

from shared.repository import BaseRepository
from shared.serializer import OWNER_SELECT, owner_display_name
from modules.content.models import ContentKind
from .models import Comment


class CommentRepository(BaseRepository[Comment]):
    """Repository for comments on one kind of content."""

    def __init__(self, db: Client, kind: ContentKind) -> None:
        super().__init__(db)
        self.kind = kind

    def _table(self):
        return self._db.table(self.kind.comment_table)

    def list_recent(self, limit: int) -> list[Comment]:
        rows = self._execute(
            f"list {self.kind.comment_table}",
            self._table().select(OWNER_SELECT).order("commented", desc=True).limit(limit),
        )
        return [self._map_to_comment(row) for row in rows]

    def list_for_target(self, target_id: str) -> list[Comment]:
        """All comments on one target, oldest first."""
        rows = self._execute(
            f"list {self.kind.comment_table} for target",
            self._table()
            .select(OWNER_SELECT)
            .eq(self.kind.target_column, target_id)
            .order("commented"),
            missing_ok=True,
        )
        return [self._map_to_comment(row) for row in rows]

    def get_by_id(self, comment_id: str) -> Optional[Comment]:
        rows = self._execute(
            f"get {self.kind.value} comment",
            self._table().select(OWNER_SELECT).eq("id", comment_id).limit(1),
            missing_ok=True,
        )
        return self._map_to_comment(rows[0]) if rows else None

    def insert(self, data: dict[str, Any]) -> str:
        """
        Insert a comment and return its new ID.

        Raises:
            ReferenceNotFound: If the owner or the target no longer exists;
                ``column`` names the violated foreign key when known.
        """
        rows = self._execute(f"insert {self.kind.value} comment", self._table().insert(data))
        return str(rows[0]["id"])

    def _map_to_comment(self, data: dict[str, Any]) -> Comment:
        return Comment(
            id=str(data["id"]),
            target_kind=self.kind,
            target_id=str(data[self.kind.target_column]),
            content=data.get("content") or "",
            owner_id=str(data["user_id"]),
            owner_name=owner_display_name(data),
            commented=data["commented"],
        )
