"""
Comments module exceptions.

A missing target is reported differently depending on where it shows up:
as the resource of a read (404) or as a bad reference inside a create
payload (400). Both carry the same message.
"""

from shared.exceptions import NotFoundError, ValidationError

TARGET_MISSING_MESSAGE = "Post does not exist"


class TargetNotFoundError(NotFoundError):
    """Raised when listing comments for a story/writing that does not exist."""

    def __init__(self, kind: str, target_id: str):
        super().__init__(
            TARGET_MISSING_MESSAGE,
            code="TARGET_NOT_FOUND",
            details={"kind": kind, "id": target_id},
        )


class InvalidTargetError(ValidationError):
    """Raised when a new comment names a story/writing that does not exist."""

    def __init__(self, kind: str, target_id: str):
        super().__init__(
            TARGET_MISSING_MESSAGE,
            code="TARGET_NOT_FOUND",
            details={"kind": kind, "id": target_id},
        )
