"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of client errors into
StorageError so that no raw PostgREST exception leaves the data layer.
"""

import logging
import re
from typing import Any, Optional, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ReferenceNotFound, StorageError


T = TypeVar("T")

logger = logging.getLogger(__name__)

# Postgres SQLSTATE codes the repositories care about
FOREIGN_KEY_VIOLATION = "23503"
INVALID_TEXT_REPRESENTATION = "22P02"

_FK_COLUMN = re.compile(r"Key \((?P<column>\w+)\)")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - ``_execute`` which runs a built query and maps client errors
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class StoryRepository(BaseRepository[ContentItem]):
            def get_by_id(self, item_id: str) -> Optional[ContentItem]:
                rows = self._execute("get story", self._db.table("stories").select("*").eq("id", item_id))
                return self._map(rows[0]) if rows else None
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(
        self,
        operation: str,
        query: Any,
        missing_ok: bool = False,
    ) -> list[dict[str, Any]]:
        """
        Execute a query builder and return its rows.

        Args:
            operation: Short description used in logs and error details.
            query: A PostgREST request builder, not yet executed.
            missing_ok: Treat a malformed identifier as "no rows" instead
                of a storage failure. Used by lookups by id.

        Raises:
            ReferenceNotFound: The store rejected a write on a foreign key.
            StorageError: Any other client or transport failure.
        """
        try:
            result = query.execute()
        except APIError as e:
            if missing_ok and e.code == INVALID_TEXT_REPRESENTATION:
                return []
            if e.code == FOREIGN_KEY_VIOLATION:
                raise ReferenceNotFound(operation, _violated_column(e)) from e
            logger.exception("Supabase error during %s", operation)
            raise StorageError(operation) from e
        except httpx.HTTPError as e:
            logger.exception("Supabase transport error during %s", operation)
            raise StorageError(operation) from e
        return result.data or []


def _violated_column(error: APIError) -> Optional[str]:
    """Extract the column name from a foreign key violation message."""
    match = _FK_COLUMN.search(error.details or "")
    return match.group("column") if match else None
