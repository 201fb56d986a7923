"""
Content API endpoints.

The same router is built once per ContentKind and mounted under
``/api/storys`` and ``/api/writings``.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from api.dependencies import content_service_dependency

from .interfaces import IContentService
from .models import ContentItemView, ContentKind


def create_content_router(kind: ContentKind) -> APIRouter:
    """Build the CRUD router for one kind of content."""
    router = APIRouter()
    get_service = content_service_dependency(kind)

    @router.get("", response_model=dict[str, list[ContentItemView]])
    async def list_items(
        service: IContentService = Depends(get_service),
    ) -> dict[str, list[ContentItemView]]:
        """
        List the most recent items, newest first (at most 10).
        """
        items = await service.list_recent()
        return {kind.collection_key: [item.serialize() for item in items]}

    @router.get("/{item_id}", response_model=ContentItemView)
    async def get_item(
        item_id: str,
        service: IContentService = Depends(get_service),
    ) -> ContentItemView:
        """Get a single item with its owner's name."""
        item = await service.get(item_id)
        return item.serialize()

    @router.post("", response_model=ContentItemView, status_code=201)
    async def create_item(
        payload: dict[str, Any] = Body(...),
        service: IContentService = Depends(get_service),
    ) -> ContentItemView:
        """
        Create an item.

        Body: ``title``, ``content`` and ``user`` (the owner's email).
        """
        item = await service.create(payload)
        return item.serialize()

    @router.put("/{item_id}", response_model=ContentItemView)
    async def update_item(
        item_id: str,
        payload: dict[str, Any] = Body(...),
        service: IContentService = Depends(get_service),
    ) -> ContentItemView:
        """
        Update an item's title and/or content.

        The body must repeat the item ID as ``id``. Other fields are ignored.
        """
        item = await service.update(item_id, payload)
        return item.serialize()

    @router.delete("/{item_id}", status_code=204)
    async def delete_item(
        item_id: str,
        service: IContentService = Depends(get_service),
    ) -> None:
        """Delete an item. Deleting a missing item still returns 204."""
        await service.remove(item_id)

    return router
