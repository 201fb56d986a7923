"""
Comments module interface.
"""

from typing import Any, Protocol, runtime_checkable

from modules.content.models import ContentKind
from .models import Comment


@runtime_checkable
class ICommentService(Protocol):
    """Interface for comment operations on one kind of content."""

    kind: ContentKind

    async def list_recent(self) -> list[Comment]:
        """Most recent comments across all targets, capped at the list limit."""
        ...

    async def list_for_target(self, target_id: str) -> list[Comment]:
        """
        All comments on one story/writing.

        Raises:
            TargetNotFoundError: If the target does not exist
        """
        ...

    async def create(self, payload: dict[str, Any]) -> Comment:
        """
        Create a comment.

        Raises:
            MissingFieldError: If content, user or the target key is absent
            OwnerNotFoundError: If the owner email resolves to no user
            InvalidTargetError: If the target does not exist
        """
        ...
