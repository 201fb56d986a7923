"""
Owner population for client-facing views.

Content items and comments store only a reference to their owner. Every
read query selects ``OWNER_SELECT`` so the owner row is embedded (inner
join), and every row-to-model mapping goes through ``owner_display_name``.
A row that reaches serialization without its owner is a storage fault,
never a ``None`` dereference.
"""

from typing import Any

from .exceptions import StorageError

OWNER_ALIAS = "owner"

# PostgREST resource embedding: the inner join drops rows whose owner
# does not resolve, so callers only ever see populated rows.
OWNER_SELECT = f"*, {OWNER_ALIAS}:users!inner(id, email, first_name, last_name)"


class OwnerNotPopulatedError(StorageError):
    """Raised when a row is serialized without its owner relation."""

    def __init__(self, row_id: Any = None):
        super().__init__("serialize", code="OWNER_NOT_POPULATED")
        self.details["row_id"] = row_id


def display_name(first_name: str, last_name: str) -> str:
    """The owner name shown to clients: ``"First Last"``."""
    return f"{first_name} {last_name}"


def owner_display_name(row: dict[str, Any]) -> str:
    """
    Read the populated owner out of a row and return its display name.

    Args:
        row: A row selected with ``OWNER_SELECT``.

    Raises:
        OwnerNotPopulatedError: If the owner relation is missing.
    """
    owner = row.get(OWNER_ALIAS)
    # A to-one embed comes back as a dict; be lenient about a one-item list.
    if isinstance(owner, list):
        owner = owner[0] if owner else None
    if not owner:
        raise OwnerNotPopulatedError(row.get("id"))
    return display_name(owner.get("first_name") or "", owner.get("last_name") or "")
