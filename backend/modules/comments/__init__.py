"""
Comments module.

Comments on stories and writings.

Public API:
- Comment, CommentView, CommentListResponse: Models
- ICommentService: Interface for comment operations
- Comment exceptions: TargetNotFoundError, InvalidTargetError
"""

from .interfaces import ICommentService
from .models import Comment, CommentView, CommentListResponse
from .exceptions import TargetNotFoundError, InvalidTargetError

__all__ = [
    "ICommentService",
    "Comment",
    "CommentView",
    "CommentListResponse",
    "TargetNotFoundError",
    "InvalidTargetError",
]
