"""End-to-end tests for health and authentication endpoints."""

import pytest
from fastapi.testclient import TestClient

from knowspace.config import API_VERSION, Settings
from knowspace.interface.api.app import create_app
from knowspace.persistence.repository.inmemory import InMemoryStore
from knowspace.util.jwt import create_token
from tests.conftest import bearer, make_user
from tests.di import build_test_container


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def client(store):
    """Create test client with test container."""
    app_instance = create_app(build_test_container(store=store))
    return TestClient(app_instance)


class TestHealth:
    """Tests for GET /health."""

    def test_health_is_public(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        assert data["version"] == API_VERSION
        assert "git_sha" in data


class TestMe:
    """Tests for GET /auth/me."""

    def test_without_credentials_returns_401(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.json() == {"detail": "Authentication required"}
        assert response.headers["www-authenticate"] == "Bearer"

    def test_with_bearer_token(self, client, store):
        user = make_user("user1", is_admin=True)
        store.users[user.id] = user

        response = client.get("/auth/me", headers=bearer(user))

        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == str(user.id)
        assert data["username"] == "user1"
        assert data["is_admin"] is True

    def test_with_cookie(self, client, store):
        user = make_user("user2")
        store.users[user.id] = user
        client.cookies.set(
            "auth_token", create_token(str(user.id), "user2", Settings().auth)
        )

        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json()["username"] == "user2"

    def test_with_invalid_token(self, client):
        response = client.get(
            "/auth/me", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid token"}

    def test_token_for_unknown_user(self, client):
        response = client.get("/auth/me", headers=bearer(make_user("gone")))

        assert response.status_code == 401
