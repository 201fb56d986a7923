"""
Authentication module interface.

Routes depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import TokenClaims, UserIdentity
from modules.users.models import User


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    def issue(self, identity: UserIdentity, min_expiry: Optional[int] = None) -> str:
        """
        Sign a bearer token for an already verified identity.

        Args:
            identity: The identity to embed in the ``user`` claim
            min_expiry: Optional lower bound (exclusive) for ``exp``

        Returns:
            Signed token whose subject is the identity's email
        """
        ...

    def refresh(self, claims: TokenClaims) -> str:
        """
        Re-issue a token for claims that were already verified.

        The new token carries the same identity and expires strictly
        later than the one it replaces. No password check happens here.
        """
        ...

    async def verify_password(self, email: str, password: str) -> User:
        """
        Check an email/password pair.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        ...

    async def login(self, email: str, password: str) -> str:
        """
        Verify credentials, issue a token and record the login.

        Recording the login is best effort and never fails the call.
        """
        ...
