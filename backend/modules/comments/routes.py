"""
Comment API endpoints.

Built once per target kind: story comments are served under
``/api/comments`` and writing comments under ``/api/writing-comments``.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from api.dependencies import comment_service_dependency
from modules.content.models import ContentKind

from .interfaces import ICommentService
from .models import CommentListResponse, CommentView


def create_comment_router(kind: ContentKind) -> APIRouter:
    """Build the comment router for one target kind."""
    router = APIRouter()
    get_service = comment_service_dependency(kind)

    @router.get("", response_model=CommentListResponse)
    async def list_comments(
        service: ICommentService = Depends(get_service),
    ) -> CommentListResponse:
        """List the most recent comments, newest first (at most 10)."""
        comments = await service.list_recent()
        return CommentListResponse(comments=[c.serialize() for c in comments])

    @router.get("/{target_id}", response_model=CommentListResponse)
    async def list_comments_for_target(
        target_id: str,
        service: ICommentService = Depends(get_service),
    ) -> CommentListResponse:
        """List every comment on one story or writing."""
        comments = await service.list_for_target(target_id)
        return CommentListResponse(comments=[c.serialize() for c in comments])

    @router.post("", response_model=CommentView, status_code=201)
    async def create_comment(
        payload: dict[str, Any] = Body(...),
        service: ICommentService = Depends(get_service),
    ) -> CommentView:
        """
        Add a comment.

        Body: ``content``, ``user`` (the owner's email) and the target ID
        under ``story`` or ``writing``.
        """
        comment = await service.create(payload)
        return comment.serialize()

    return router
