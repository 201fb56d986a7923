"""
Users module data models.

Users are created outside this service (registration is not exposed);
this module only reads them and records logins.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import UserIdentity
from shared.serializer import display_name


class User(BaseModel):
    """A stored user record, including the password hash."""

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address, unique and case-sensitive")
    first_name: str = Field(default="", description="Given name")
    last_name: str = Field(default="", description="Family name")
    password_hash: str = Field(default="", repr=False, description="bcrypt hash")
    last_login: Optional[datetime] = Field(None, description="Last successful login")

    @property
    def display_name(self) -> str:
        return display_name(self.first_name, self.last_name)

    def to_identity(self) -> UserIdentity:
        """Public projection used as the token payload."""
        return UserIdentity(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
        )
