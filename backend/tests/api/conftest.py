"""Fixtures for API-level tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from api.app import create_app
from modules.users.models import User
from modules.users.repository import UserRepository
from tests.conftest import TEST_PASSWORD, TEST_USER_EMAIL, create_mock_user_row, fast_hash


@pytest.fixture
def app() -> FastAPI:
    """A fresh application; overrides are cleared afterwards."""
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def users() -> MagicMock:
    """User repository holding one user, Alice Smith."""
    repo = MagicMock(spec=UserRepository)
    alice = User(**create_mock_user_row(password_hash=fast_hash(TEST_PASSWORD)))
    repo.get_by_email.side_effect = lambda email: alice if email == TEST_USER_EMAIL else None
    return repo


