"""
Content module.

Stories and writings: list, get, create, update and delete, with the
owner's display name embedded in every response.

Public API:
- ContentKind: Which kind of work (story or writing)
- ContentItem, ContentItemView: Domain model and client view
- IContentService: Interface for content operations
- Content exceptions: ContentNotFoundError, IdMismatchError
"""

from .interfaces import IContentService
from .models import ContentKind, ContentItem, ContentItemView
from .exceptions import ContentNotFoundError, IdMismatchError

__all__ = [
    # Interface
    "IContentService",
    # Models
    "ContentKind",
    "ContentItem",
    "ContentItemView",
    # Exceptions
    "ContentNotFoundError",
    "IdMismatchError",
]
