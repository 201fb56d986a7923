"""
Content module exceptions.
"""

from typing import Any

from shared.exceptions import NotFoundError, ValidationError


class ContentNotFoundError(NotFoundError):
    """Raised when a story or writing does not exist."""

    def __init__(self, kind: str, item_id: str):
        super().__init__(
            f"{kind.capitalize()} not found: {item_id}",
            code="CONTENT_NOT_FOUND",
            details={"kind": kind, "id": item_id},
        )


class IdMismatchError(ValidationError):
    """Raised when the path id and the body id of an update differ."""

    def __init__(self, path_id: Any, body_id: Any):
        super().__init__(
            f"Request path id ({path_id}) and request body id ({body_id}) must match",
            code="ID_MISMATCH",
            details={"path_id": path_id, "body_id": body_id},
        )
