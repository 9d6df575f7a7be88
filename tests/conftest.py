"""Shared fixtures for the MentorConnect test-suite.

Environment variables are set before anything from ``mentorconnect`` is
imported, because the database engine and the settings are created at import
time.
"""

from __future__ import annotations

import json
import os
import sys
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

_TEST_DIR = Path(tempfile.mkdtemp(prefix="mentorconnect-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DIR / 'test.db'}"
os.environ["AUTH_API_URL"] = "http://backend.test"
os.environ["LLM_BASE_URL"] = "http://llm.test"
os.environ["NOTIFICATION_FETCH_DELAY_SECONDS"] = "0"
os.environ["PAGE_FETCH_DELAY_SECONDS"] = "0"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["AI_REPLIES_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import httpx  # noqa: E402
from jose import jwt  # noqa: E402

from mentorconnect.infrastructure import database  # noqa: E402
from mentorconnect.infrastructure.local_storage import (  # noqa: E402
    REFRESH_TOKEN_KEY,
    TOKEN_KEY,
    LocalStorage,
)

PASSWORD = "Secret123"

USERS: dict[str, dict[str, Any]] = {
    "student@example.com": {
        "_id": "u-student",
        "email": "student@example.com",
        "firstName": "Ana",
        "lastName": "Lopez",
        "role": "student",
        "isVerified": True,
        "isActive": True,
    },
    "alumni@example.com": {
        "_id": "u-alumni",
        "email": "alumni@example.com",
        "firstName": "Ben",
        "lastName": "Okafor",
        "role": "alumni",
        "isVerified": True,
        "isActive": True,
    },
    "admin@example.com": {
        "_id": "u-admin",
        "email": "admin@example.com",
        "firstName": "Carla",
        "lastName": "Diaz",
        "role": "admin",
        "isVerified": True,
        "isActive": True,
    },
}


def make_token(subject: str, *, expires_in: timedelta = timedelta(hours=1), nonce: int = 0) -> str:
    expires = datetime.now(tz=timezone.utc) + expires_in
    claims = {"sub": subject, "exp": int(expires.timestamp()), "jti": str(nonce)}
    return jwt.encode(claims, "test-secret", algorithm="HS256")


class FakeBackend:
    """In-memory stand-in for the auth, profile and LLM servers."""

    def __init__(self) -> None:
        self.users = {email: dict(user) for email, user in USERS.items()}
        self.access_tokens: dict[str, str] = {}
        self.refresh_tokens: dict[str, str] = {}
        self.profiles: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.llm_online = True
        self.llm_reply = "Happy to help with that!"
        self.offline = False
        self._counter = 0

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def issue_tokens(self, email: str) -> tuple[str, str]:
        self._counter += 1
        token = make_token(email, nonce=self._counter)
        refresh = f"refresh-{email}-{self._counter}"
        self.access_tokens[token] = email
        self.refresh_tokens[refresh] = email
        return token, refresh

    def revoke_access_tokens(self) -> None:
        self.access_tokens.clear()

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if self.offline:
            raise httpx.ConnectError("connection refused", request=request)
        if path.startswith("/api/auth/"):
            return self._handle_auth(request, path)
        if path.startswith("/api/profile/"):
            return self._handle_profile(request, path)
        return self._handle_llm(request, path)

    def _body(self, request: httpx.Request) -> dict[str, Any]:
        return json.loads(request.content or b"{}")

    def _bearer_email(self, request: httpx.Request) -> str | None:
        header = request.headers.get("Authorization", "")
        if not header.startswith("Bearer "):
            return None
        return self.access_tokens.get(header.removeprefix("Bearer "))

    def _auth_payload(self, email: str) -> dict[str, Any]:
        token, refresh = self.issue_tokens(email)
        return {"data": {"token": token, "refreshToken": refresh, "user": self.users[email]}}

    def _handle_auth(self, request: httpx.Request, path: str) -> httpx.Response:
        if path == "/api/auth/login":
            body = self._body(request)
            email = body.get("email")
            if email not in self.users or body.get("password") != PASSWORD:
                return httpx.Response(401, json={"message": "Invalid email or password"})
            return httpx.Response(200, json=self._auth_payload(email))

        if path == "/api/auth/signup":
            body = self._body(request)
            email = body.get("email")
            if email in self.users:
                return httpx.Response(400, json={"message": "User already exists"})
            self.users[email] = {
                "_id": f"u-{len(self.users) + 1}",
                "email": email,
                "firstName": body.get("firstName"),
                "lastName": body.get("lastName"),
                "role": body.get("role"),
                "isVerified": False,
                "isActive": True,
            }
            return httpx.Response(201, json=self._auth_payload(email))

        if path == "/api/auth/me":
            email = self._bearer_email(request)
            if email is None:
                return httpx.Response(401, json={"message": "Token expired"})
            return httpx.Response(200, json={"data": self.users[email]})

        if path == "/api/auth/refresh-token":
            email = self.refresh_tokens.get(self._body(request).get("refreshToken"))
            if email is None:
                return httpx.Response(401, json={"message": "Invalid refresh token"})
            token, _ = self.issue_tokens(email)
            return httpx.Response(200, json={"data": {"token": token}})

        return httpx.Response(404, json={"message": "Not found"})

    def _handle_profile(self, request: httpx.Request, path: str) -> httpx.Response:
        email = self._bearer_email(request)
        if email is None:
            return httpx.Response(401, json={"message": "Not authorized"})
        profile = self.profiles.setdefault(email, {"bio": "", "skills": []})

        if path == "/api/profile/me":
            return httpx.Response(200, json={"profile": profile})
        if path == "/api/profile/update":
            profile.update(self._body(request))
            return httpx.Response(200, json={"profile": profile})
        if path == "/api/profile/upload-image":
            if "multipart/form-data" not in request.headers.get("Content-Type", ""):
                return httpx.Response(400, json={"message": "Expected multipart upload"})
            profile["profileImage"] = "https://cdn.example.com/avatar.png"
            return httpx.Response(200, json={"imageUrl": profile["profileImage"]})
        return httpx.Response(404, json={"message": "Not found"})

    def _handle_llm(self, request: httpx.Request, path: str) -> httpx.Response:
        if not self.llm_online:
            raise httpx.ConnectError("connection refused", request=request)
        if path == "/api/tags":
            return httpx.Response(200, json={"models": [{"name": "llama3.2"}]})
        if path == "/api/chat":
            return httpx.Response(
                200, json={"message": {"role": "assistant", "content": self.llm_reply}}
            )
        if path == "/api/generate":
            return httpx.Response(200, json={"response": self.llm_reply})
        return httpx.Response(404, json={"error": "not found"})


@pytest.fixture(autouse=True)
def clean_storage() -> None:
    """Create the tables and forget any stored tokens before every test."""

    database.initialize_database()
    storage = LocalStorage(database.SessionLocal)
    storage.remove_item(TOKEN_KEY)
    storage.remove_item(REFRESH_TOKEN_KEY)


@pytest.fixture()
def storage() -> LocalStorage:
    return LocalStorage(database.SessionLocal)


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def token_factory():
    return make_token
