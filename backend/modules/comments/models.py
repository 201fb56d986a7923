"""
Comments module data models.
"""

from datetime import datetime
from pydantic import BaseModel, Field

from modules.content.models import ContentKind


class CommentView(BaseModel):
    """Client-facing view of a comment."""

    id: str
    content: str
    user: str = Field(..., description="Owner display name")
    commented: datetime


class CommentListResponse(BaseModel):
    """Response for comment listings."""

    comments: list[CommentView] = Field(default_factory=list)


class Comment(BaseModel):
    """A comment on a story or writing, with its owner populated."""

    id: str = Field(..., description="Comment ID (UUID)")
    target_kind: ContentKind
    target_id: str = Field(..., description="ID of the story or writing")
    content: str = ""
    owner_id: str = Field(..., description="Owning user ID")
    owner_name: str = Field(..., description="Owner display name")
    commented: datetime = Field(..., description="When the comment was posted")

    def serialize(self) -> CommentView:
        return CommentView(
            id=self.id,
            content=self.content,
            user=self.owner_name,
            commented=self.commented,
        )
