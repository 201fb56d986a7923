"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import bcrypt
import jwt  # PyJWT

from api.dependencies import reset_container
from shared.config import get_settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

TEST_USER_ID = "11111111-1111-1111-1111-111111111111"
TEST_USER_EMAIL = "alice@x.com"
TEST_PASSWORD = "correct horse battery staple"


def create_test_token(
    user_id: str = TEST_USER_ID,
    email: str = TEST_USER_EMAIL,
    first_name: str = "Alice",
    last_name: str = "Smith",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    algorithm: str = "HS256",
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """
    Create a test bearer token shaped like the ones the auth module issues.

    Args:
        user_id: User ID in the embedded identity
        email: Email used as identity email and subject
        expired: If True, creates an expired token
        secret: Signing secret
        algorithm: Signing algorithm
        expires_in: Lifetime when not expired

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + expires_in

    payload = {
        "user": {
            "id": user_id,
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
        },
        "sub": email,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def fast_hash(password: str) -> str:
    """bcrypt hash with the minimum cost factor, for fixtures."""
    return bcrypt.hashpw(password.encode("utf-8")[:72], bcrypt.gensalt(rounds=4)).decode("utf-8")


def create_mock_user_row(
    user_id: str = TEST_USER_ID,
    email: str = TEST_USER_EMAIL,
    first_name: str = "Alice",
    last_name: str = "Smith",
    password_hash: str = "",
) -> dict:
    """Helper to create a users table row."""
    return {
        "id": user_id,
        "email": email,
        "first_name": first_name,
        "last_name": last_name,
        "password_hash": password_hash,
        "last_login": None,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }


def create_mock_content_row(
    item_id: str = "22222222-2222-2222-2222-222222222222",
    title: str = "A",
    content: str = "B",
    user_id: str = TEST_USER_ID,
    first_name: str = "Alice",
    last_name: str = "Smith",
    updated: Optional[str] = None,
    with_owner: bool = True,
) -> dict:
    """Helper to create a stories/writings row with the owner embedded."""
    row = {
        "id": item_id,
        "title": title,
        "content": content,
        "user_id": user_id,
        "posted": datetime.now(timezone.utc).isoformat(),
        "updated": updated,
    }
    if with_owner:
        row["owner"] = {
            "id": user_id,
            "email": TEST_USER_EMAIL,
            "first_name": first_name,
            "last_name": last_name,
        }
    return row


def create_mock_comment_row(
    comment_id: str = "33333333-3333-3333-3333-333333333333",
    content: str = "Nice one",
    user_id: str = TEST_USER_ID,
    target_column: str = "story_id",
    target_id: str = "22222222-2222-2222-2222-222222222222",
    first_name: str = "Alice",
    last_name: str = "Smith",
) -> dict:
    """Helper to create a comment row with the owner embedded."""
    return {
        "id": comment_id,
        "content": content,
        "user_id": user_id,
        target_column: target_id,
        "commented": datetime.now(timezone.utc).isoformat(),
        "owner": {
            "id": user_id,
            "email": TEST_USER_EMAIL,
            "first_name": first_name,
            "last_name": last_name,
        },
    }


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Point settings at the test secret and reset cached singletons."""
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()
    yield
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
