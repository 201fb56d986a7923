"""
Content module data models.

Stories and writings are the same shape; ContentKind tells them apart and
carries everything that differs between the two (table names, JSON keys,
the comment table that targets them).
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ContentKind(str, Enum):
    """Kinds of published work."""

    STORY = "story"
    WRITING = "writing"

    @property
    def table(self) -> str:
        """Table holding items of this kind."""
        return _TABLES[self]

    @property
    def collection_key(self) -> str:
        """JSON key of the list response (``storys`` / ``writings``)."""
        return f"{self.value}s"

    @property
    def comment_table(self) -> str:
        """Table holding comments that target this kind."""
        return f"{self.value}_comments"

    @property
    def target_key(self) -> str:
        """Body key naming the target in a comment payload."""
        return self.value

    @property
    def target_column(self) -> str:
        """Foreign key column in the comment table."""
        return f"{self.value}_id"


_TABLES = {
    ContentKind.STORY: "stories",
    ContentKind.WRITING: "writings",
}


class ContentItemView(BaseModel):
    """Client-facing view of a content item."""

    id: str
    title: str
    content: str
    user: str = Field(..., description="Owner display name")
    posted: datetime
    updated: Optional[datetime] = None


class ContentItem(BaseModel):
    """A story or writing with its owner populated."""

    id: str = Field(..., description="Item ID (UUID)")
    kind: ContentKind
    title: str = ""
    content: str = ""
    owner_id: str = Field(..., description="Owning user ID")
    owner_name: str = Field(..., description="Owner display name")
    posted: datetime = Field(..., description="Creation time, set once")
    updated: Optional[datetime] = Field(None, description="Last update time")

    def serialize(self) -> ContentItemView:
        return ContentItemView(
            id=self.id,
            title=self.title,
            content=self.content,
            user=self.owner_name,
            posted=self.posted,
            updated=self.updated,
        )
