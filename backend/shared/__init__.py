"""
Shared infrastructure for Storyline backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository with storage error mapping
- serializer: Owner population for client-facing views
- validation: Required-field checks on request bodies

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    StorylineError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ExternalServiceError,
    StorageError,
    ReferenceNotFound,
)
from .models import UserIdentity, TokenClaims
from .validation import MissingFieldError, require_fields

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "StorylineError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ExternalServiceError",
    "StorageError",
    "ReferenceNotFound",
    "UserIdentity",
    "TokenClaims",
    "MissingFieldError",
    "require_fields",
]
