"""
Base exception classes for the Storyline backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to a single HTTP status code, so a module only
has to pick the right parent class.
"""

from typing import Optional, Any


class StorylineError(Exception):
    """
    Base exception for all Storyline errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(StorylineError):
    """Resource not found."""

    status_code = 404


class ValidationError(StorylineError):
    """Input validation failed. Raised before any write happens."""

    status_code = 400


class AuthenticationError(StorylineError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class ExternalServiceError(StorylineError):
    """Error communicating with an external service."""

    status_code = 500

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StorageError(ExternalServiceError):
    """
    Unexpected backing-store failure.

    The client only ever sees a generic message. The operation and service
    stay on ``details`` for logging and are left out of the response body;
    the original error is kept on ``__cause__``.
    """

    def __init__(self, operation: str, code: Optional[str] = None):
        super().__init__(
            "Internal server error",
            service="supabase",
            code=code or "STORAGE_ERROR",
            details={"operation": operation},
        )
        self.operation = operation

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": {},
        }


class ReferenceNotFound(StorageError):
    """
    A write was rejected because a referenced row does not exist.

    Raised by repositories when the store refuses an insert on a foreign
    key. Services translate it into their own validation error.
    """

    def __init__(self, operation: str, column: Optional[str] = None):
        super().__init__(operation, code="REFERENCE_NOT_FOUND")
        self.column = column
        if column:
            self.details["column"] = column
