"""
Authentication module data models.

These models define the request and response bodies of the auth
endpoints. The token payload itself (UserIdentity, TokenClaims) lives
in shared.models because the bearer dependency needs it too.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials exchanged for a bearer token."""

    email: str = Field(..., min_length=1, description="User's email address")
    password: str = Field(..., min_length=1, description="Plain text password")


class AuthTokenResponse(BaseModel):
    """Response carrying a freshly signed bearer token."""

    authToken: str = Field(..., description="Signed HS256 bearer token")
