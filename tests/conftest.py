"""Shared fixtures: an isolated service and HTTP client per test."""

from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient

from memory.store import InMemoryStore
from server.api import create_app
from wearorithm_app.app import WearorithmApp
from wearorithm_app.config import WearorithmConfig


@pytest.fixture()
def config() -> WearorithmConfig:
    """Mock-mode config: no Gemini key, small upload limit."""

    return WearorithmConfig(
        gemini_api_key=None,
        session_secret="test-secret",
        max_upload_bytes=1024,
    )


@pytest.fixture()
def service(config: WearorithmConfig) -> WearorithmApp:
    return WearorithmApp(config=config, store=InMemoryStore())


@pytest.fixture()
def client(service: WearorithmApp) -> TestClient:
    return TestClient(create_app(service))


@pytest.fixture()
def register(client: TestClient) -> Callable[..., Dict[str, str]]:
    """Register a user over HTTP and return auth headers for it."""

    def _register(username: str = "ada", email: str | None = None) -> Dict[str, str]:
        response = client.post(
            "/api/auth/register",
            json={
                "username": username,
                "email": email or f"{username}@example.com",
                "password": "secret123",
                "confirmPassword": "secret123",
                "firstName": username.title(),
                "lastName": "Tester",
            },
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register
