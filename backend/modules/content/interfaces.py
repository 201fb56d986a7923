"""
Content module interface.

Routes depend on IContentService, not the concrete implementation.
"""

from typing import Any, Protocol, runtime_checkable

from .models import ContentItem, ContentKind


@runtime_checkable
class IContentService(Protocol):
    """
    Interface for story/writing operations.

    Every item returned has its owner populated.
    """

    kind: ContentKind

    async def list_recent(self) -> list[ContentItem]:
        """Most recently posted items, newest first, capped at the list limit."""
        ...

    async def get(self, item_id: str) -> ContentItem:
        """
        Get one item.

        Raises:
            ContentNotFoundError: If the item does not exist
        """
        ...

    async def create(self, payload: dict[str, Any]) -> ContentItem:
        """
        Create an item owned by the user whose email is ``payload["user"]``.

        Raises:
            MissingFieldError: If title, content or user is absent
            OwnerNotFoundError: If the email resolves to no user
        """
        ...

    async def update(self, item_id: str, payload: dict[str, Any]) -> ContentItem:
        """
        Update title and/or content and stamp ``updated``.

        Raises:
            IdMismatchError: If ``payload["id"]`` differs from ``item_id``
            ContentNotFoundError: If the item does not exist
        """
        ...

    async def remove(self, item_id: str) -> None:
        """Delete an item. Succeeds whether or not it existed."""
        ...
