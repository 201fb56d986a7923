"""
Authentication service implementation.

Signs HS256 bearer tokens, verifies email/password credentials against
bcrypt hashes stored in Supabase, and records logins.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from shared.config import get_settings
from shared.models import TokenClaims, UserIdentity
from modules.users.models import User
from modules.users.repository import UserRepository

from .interfaces import IAuthService
from .exceptions import InvalidCredentialsError, TokenIssueError

logger = logging.getLogger(__name__)

# Fixed on purpose: tokens signed with anything else are rejected.
SIGNING_ALGORITHM = "HS256"

# Unawaited bookkeeping tasks, kept referenced until they finish.
_background_tasks: set[asyncio.Task] = set()


def check_password(password: str, password_hash: str) -> bool:
    """Verify a password against its bcrypt hash."""
    if not password_hash:
        return False
    try:
        # bcrypt only looks at the first 72 bytes
        return bcrypt.checkpw(password.encode("utf-8")[:72], password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Token verification is not done here: it belongs to the bearer
    dependency in api.middleware.auth, which hands verified claims to
    ``refresh``.
    """

    def __init__(self, users: UserRepository):
        self._settings = get_settings()
        self._users = users

    def issue(self, identity: UserIdentity, min_expiry: Optional[int] = None) -> str:
        """
        Sign a token for an identity.

        Claims: ``user`` (the identity), ``sub`` (email), ``iat``, ``exp``.
        """
        secret = self._settings.jwt_secret
        if not secret:
            raise TokenIssueError()

        now = datetime.now(timezone.utc)
        expires_at = int((now + timedelta(seconds=self._settings.jwt_expiry_seconds)).timestamp())
        if min_expiry is not None and expires_at <= min_expiry:
            expires_at = min_expiry + 1

        payload = {
            "user": identity.model_dump(),
            "sub": identity.email,
            "iat": int(now.timestamp()),
            "exp": expires_at,
        }
        return jwt.encode(payload, secret, algorithm=SIGNING_ALGORITHM)

    def refresh(self, claims: TokenClaims) -> str:
        """Re-issue a token for the same identity with a later expiry."""
        return self.issue(claims.user, min_expiry=claims.exp)

    async def verify_password(self, email: str, password: str) -> User:
        """Look the user up by email and check the bcrypt hash."""
        user = await asyncio.to_thread(self._users.get_by_email, email)
        if user is None or not check_password(password, user.password_hash):
            logger.info("Rejected login for %s", email)
            raise InvalidCredentialsError()
        return user

    async def login(self, email: str, password: str) -> str:
        """Verify credentials, issue a token and record the login."""
        user = await self.verify_password(email, password)
        token = self.issue(user.to_identity())
        self._record_login(user.id)
        return token

    def _record_login(self, user_id: str) -> None:
        """Schedule the last-login update without waiting for it."""
        task = asyncio.create_task(
            self._update_last_login(user_id, datetime.now(timezone.utc))
        )
        _background_tasks.add(task)
        task.add_done_callback(_background_tasks.discard)

    async def _update_last_login(self, user_id: str, when: datetime) -> None:
        try:
            await asyncio.to_thread(self._users.update_last_login, user_id, when)
        except Exception:
            logger.warning("Failed to record login for user %s", user_id, exc_info=True)


async def wait_for_background_tasks() -> None:
    """Wait for outstanding login bookkeeping (used on shutdown and in tests)."""
    if _background_tasks:
        await asyncio.gather(*list(_background_tasks), return_exceptions=True)
