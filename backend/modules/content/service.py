"""
Content service implementation.

Create/list/get/update/delete for stories and writings. A single class
handles both kinds; the injected repository decides which table is used.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

from shared.config import get_settings
from shared.exceptions import ReferenceNotFound
from shared.validation import require_fields
from modules.users.exceptions import OwnerNotFoundError
from modules.users.repository import UserRepository

from .interfaces import IContentService
from .models import ContentItem
from .repository import ContentRepository
from .exceptions import ContentNotFoundError, IdMismatchError

logger = logging.getLogger(__name__)

CREATE_FIELDS = ("title", "content", "user")
UPDATABLE_FIELDS = ("title", "content")


class ContentService(IContentService):
    """
    Story/writing service backed by Supabase repositories.

    Repository calls are blocking HTTP requests and run in worker threads
    so the event loop keeps serving other requests meanwhile.
    """

    def __init__(self, items: ContentRepository, users: UserRepository):
        self._items = items
        self._users = users
        self._settings = get_settings()
        self.kind = items.kind

    async def list_recent(self) -> list[ContentItem]:
        return await asyncio.to_thread(self._items.list_recent, self._settings.list_limit)

    async def get(self, item_id: str) -> ContentItem:
        item = await asyncio.to_thread(self._items.get_by_id, item_id)
        if item is None:
            raise ContentNotFoundError(self.kind.value, item_id)
        return item

    async def create(self, payload: dict[str, Any]) -> ContentItem:
        """
        Resolve the owner, insert, then re-read the item.

        The insert response carries only the owner ID, so the item is read
        back to return it with the owner populated.
        """
        require_fields(payload, CREATE_FIELDS)

        email = str(payload["user"])
        owner = await asyncio.to_thread(self._users.get_by_email, email)
        if owner is None:
            raise OwnerNotFoundError(email)

        data = {
            "title": payload["title"],
            "content": payload["content"],
            "user_id": owner.id,
            "posted": datetime.now(timezone.utc).isoformat(),
        }
        try:
            item_id = await asyncio.to_thread(self._items.insert, data)
        except ReferenceNotFound as e:
            # Owner removed between the lookup and the insert
            raise OwnerNotFoundError(email) from e

        logger.info("Created %s %s for user %s", self.kind.value, item_id, owner.id)
        return await self.get(item_id)

    async def update(self, item_id: str, payload: dict[str, Any]) -> ContentItem:
        body_id = payload.get("id")
        if not (item_id and isinstance(body_id, str) and body_id == item_id):
            raise IdMismatchError(item_id, body_id)

        fields = {
            field: payload[field]
            for field in UPDATABLE_FIELDS
            if field in payload
        }
        fields["updated"] = datetime.now(timezone.utc).isoformat()

        if not await asyncio.to_thread(self._items.update, item_id, fields):
            raise ContentNotFoundError(self.kind.value, item_id)
        return await self.get(item_id)

    async def remove(self, item_id: str) -> None:
        await asyncio.to_thread(self._items.delete, item_id)
        logger.info("Deleted %s %s", self.kind.value, item_id)
