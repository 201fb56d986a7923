"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field


class UserIdentity(BaseModel):
    """
    Identity payload embedded in bearer tokens.

    This is the public projection of a user: it never carries the
    password hash and is what the token issuer signs into the ``user``
    claim.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="User's email address")
    first_name: str = Field(default="", description="Given name")
    last_name: str = Field(default="", description="Family name")

    model_config = ConfigDict(
        frozen=True,  # Make immutable for safety
        extra="ignore",
    )


class TokenClaims(BaseModel):
    """
    Verified claims of a bearer token.

    Populated by the bearer verification dependency and made available
    to route handlers via dependency injection.
    """

    user: UserIdentity
    sub: str = Field(..., description="Subject (user email)")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)
