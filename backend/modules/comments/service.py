"""
Comments service implementation.

Comments are attached to exactly one story or writing. The same class
serves both; the injected repositories decide which tables are used.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

from shared.config import get_settings
from shared.exceptions import ReferenceNotFound
from shared.validation import require_fields
from modules.content.repository import ContentRepository
from modules.users.exceptions import OwnerNotFoundError
from modules.users.repository import UserRepository

from .interfaces import ICommentService
from .models import Comment
from .repository import CommentRepository
from .exceptions import InvalidTargetError, TargetNotFoundError

logger = logging.getLogger(__name__)


class CommentService(ICommentService):
    """
    Comment service backed by Supabase repositories.

    Repository calls run in worker threads, as in ContentService.
    """

    def __init__(
        self,
        comments: CommentRepository,
        targets: ContentRepository,
        users: UserRepository,
    ):
        if comments.kind != targets.kind:
            raise ValueError(
                f"Comment kind {comments.kind.value} does not match target kind {targets.kind.value}"
            )
        self._comments = comments
        self._targets = targets
        self._users = users
        self._settings = get_settings()
        self.kind = comments.kind

    @property
    def required_fields(self) -> tuple[str, ...]:
        return ("content", "user", self.kind.target_key)

    async def list_recent(self) -> list[Comment]:
        return await asyncio.to_thread(self._comments.list_recent, self._settings.list_limit)

    async def list_for_target(self, target_id: str) -> list[Comment]:
        if not await asyncio.to_thread(self._targets.exists, target_id):
            raise TargetNotFoundError(self.kind.value, target_id)
        return await asyncio.to_thread(self._comments.list_for_target, target_id)

    async def create(self, payload: dict[str, Any]) -> Comment:
        """
        Check the owner, then the target, then insert and re-read.

        Both checks run before the insert. The foreign keys on the comment
        table reject the insert if either row disappears in between, and
        that rejection is reported the same way as a failed check.
        """
        require_fields(payload, self.required_fields)

        email = str(payload["user"])
        owner = await asyncio.to_thread(self._users.get_by_email, email)
        if owner is None:
            raise OwnerNotFoundError(email)

        target_id = str(payload[self.kind.target_key])
        if not await asyncio.to_thread(self._targets.exists, target_id):
            raise InvalidTargetError(self.kind.value, target_id)

        data = {
            "content": payload["content"],
            "user_id": owner.id,
            self.kind.target_column: target_id,
            "commented": datetime.now(timezone.utc).isoformat(),
        }
        try:
            comment_id = await asyncio.to_thread(self._comments.insert, data)
        except ReferenceNotFound as e:
            if e.column == "user_id":
                raise OwnerNotFoundError(email) from e
            raise InvalidTargetError(self.kind.value, target_id) from e

        logger.info(
            "Created %s comment %s on %s by user %s",
            self.kind.value, comment_id, target_id, owner.id,
        )
        comment = await asyncio.to_thread(self._comments.get_by_id, comment_id)
        if comment is None:
            # Target deleted (cascading to the comment) right after the insert
            raise InvalidTargetError(self.kind.value, target_id)
        return comment
