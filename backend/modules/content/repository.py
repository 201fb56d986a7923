"""
Content repository for database access.

One repository class serves both ``stories`` and ``writings``; the
ContentKind passed at construction selects the table. Every read selects
the owner relation so mapped items are always populated.
"""

from typing import Any, Optional

from supabase import Client

from shared.repository import BaseRepository
from shared.serializer import OWNER_SELECT, owner_display_name
from .models import ContentItem, ContentKind


class ContentRepository(BaseRepository[ContentItem]):
    """
    Repository for story/writing data access.

    Note: This repository does NOT validate payloads. The service layer
    checks required fields and resolves the owner before writing.
    """

    def __init__(self, db: Client, kind: ContentKind) -> None:
        super().__init__(db)
        self.kind = kind

    def _table(self):
        return self._db.table(self.kind.table)

    def list_recent(self, limit: int) -> list[ContentItem]:
        """Most recently posted items first."""
        rows = self._execute(
            f"list {self.kind.table}",
            self._table().select(OWNER_SELECT).order("posted", desc=True).limit(limit),
        )
        return [self._map_to_item(row) for row in rows]

    def get_by_id(self, item_id: str) -> Optional[ContentItem]:
        rows = self._execute(
            f"get {self.kind.value}",
            self._table().select(OWNER_SELECT).eq("id", item_id).limit(1),
            missing_ok=True,
        )
        return self._map_to_item(rows[0]) if rows else None

    def exists(self, item_id: str) -> bool:
        rows = self._execute(
            f"check {self.kind.value}",
            self._table().select("id").eq("id", item_id).limit(1),
            missing_ok=True,
        )
        return bool(rows)

    def insert(self, data: dict[str, Any]) -> str:
        """
        Insert an item and return its new ID.

        Raises:
            ReferenceNotFound: If the owner no longer exists.
        """
        rows = self._execute(f"insert {self.kind.value}", self._table().insert(data))
        return str(rows[0]["id"])

    def update(self, item_id: str, fields: dict[str, Any]) -> bool:
        """Apply ``fields`` to one item. Returns False if no row matched."""
        rows = self._execute(
            f"update {self.kind.value}",
            self._table().update(fields).eq("id", item_id),
            missing_ok=True,
        )
        return bool(rows)

    def delete(self, item_id: str) -> None:
        """Delete by ID. Deleting a missing row is not an error."""
        self._execute(
            f"delete {self.kind.value}",
            self._table().delete().eq("id", item_id),
            missing_ok=True,
        )

    def _map_to_item(self, data: dict[str, Any]) -> ContentItem:
        return ContentItem(
            id=str(data["id"]),
            kind=self.kind,
            title=data.get("title") or "",
            content=data.get("content") or "",
            owner_id=str(data["user_id"]),
            owner_name=owner_display_name(data),
            posted=data["posted"],
            updated=data.get("updated"),
        )
