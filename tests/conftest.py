"""Test fixtures: TestClient with an injected (or absent) signed-in user."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from api.deps import get_optional_user
from main import app
from models.user import UserIdentity

TEST_USER = UserIdentity(uid="user-123", email="ana@example.com")


@pytest.fixture()
def anonymous_client():
    app.dependency_overrides[get_optional_user] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def client():
    app.dependency_overrides[get_optional_user] = lambda: TEST_USER
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def firebase_auth():
    """Firebase Admin auth client replaced by a mock; no real credentials needed."""
    mock_auth = MagicMock()
    with patch("core.firebase.auth_client", mock_auth):
        yield mock_auth
