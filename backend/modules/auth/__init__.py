"""
Authentication module.

Handles credential verification, bearer token issuance and refresh.

Public API:
- IAuthService: Interface for auth operations
- LoginRequest, AuthTokenResponse: Endpoint bodies
- Auth exceptions: InvalidCredentialsError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService
from .models import LoginRequest, AuthTokenResponse
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    TokenConfigurationError,
    TokenIssueError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "LoginRequest",
    "AuthTokenResponse",
    # Exceptions
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "TokenConfigurationError",
    "TokenIssueError",
]
