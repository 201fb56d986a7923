"""
Users module exceptions.
"""

from shared.exceptions import ValidationError


class OwnerNotFoundError(ValidationError):
    """Raised when a payload names an owner email that resolves to no user."""

    def __init__(self, email: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"email": email},
        )
