"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, StorylineError


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not match a user."""

    def __init__(self, message: str = "Incorrect email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Missing authorization header"):
        super().__init__(message, code="MISSING_TOKEN")


class TokenConfigurationError(AuthenticationError):
    """Raised when the server has no signing secret configured."""

    def __init__(self, message: str = "Server authentication not configured"):
        super().__init__(message, code="AUTH_NOT_CONFIGURED")


class TokenIssueError(StorylineError):
    """Raised when a token cannot be signed (server side problem)."""

    def __init__(self, message: str = "Server authentication not configured"):
        super().__init__(message, code="TOKEN_ISSUE_FAILED")
