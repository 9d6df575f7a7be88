"""Fixtures for the HTTP-level tests."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient  # noqa: E402

PASSWORD = "Secret123"


@pytest.fixture()
def client(backend):
    """Return a test client whose outbound HTTP goes to the fake backend."""

    from main import create_app

    app = create_app(transport=backend.transport)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def login(client):
    def _login(email: str) -> dict:
        response = client.post("/session/login", json={"email": email, "password": PASSWORD})
        assert response.status_code == 200, response.text
        return response.json()

    return _login
