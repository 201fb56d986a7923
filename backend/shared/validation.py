"""
Structural checks on inbound JSON payloads.
"""

from typing import Any, Iterable

from .exceptions import ValidationError


class MissingFieldError(ValidationError):
    """Raised when a required key is absent from a request body."""

    def __init__(self, field: str):
        super().__init__(
            f"Missing `{field}` in request body",
            code="MISSING_FIELD",
            details={"field": field},
        )
        self.field = field


def require_fields(payload: dict[str, Any], fields: Iterable[str]) -> None:
    """
    Check that every key in ``fields`` is present in ``payload``.

    Keys are checked in order and the first missing one is reported.
    Presence is what counts: a key set to null is present.

    Raises:
        MissingFieldError: Naming the first missing key
    """
    for field in fields:
        if field not in payload:
            raise MissingFieldError(field)
