"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from devflow.config import Settings
from devflow.interface.api.app import create_app
from devflow.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


@pytest.fixture
def register(client):
    """Create a user through the identity provider webhook.

    Returns a function taking a username and returning ``(user, cookies)``,
    where ``cookies`` authenticate as that user.
    """
    settings = Settings()

    def _register(username: str):
        response = client.post(
            "/users",
            json={
                "clerk_id": f"user_{username}",
                "name": username.title(),
                "username": username,
                "email": f"{username}@example.com",
            },
            headers={"X-Webhook-Secret": settings.auth.webhook_secret},
        )
        assert response.status_code == 201, response.text
        token = create_token(f"user_{username}", settings.auth)
        return response.json(), {"auth_token": token}

    return _register
