"""HTTP client for the authentication backend."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mentorconnect.domain.entities import Role, User

from .backend_client import BackendClient, BackendServiceError

logger = logging.getLogger(__name__)


class AuthServiceError(BackendServiceError):
    """Raised when the auth backend rejects a request or cannot be reached."""


class BackendUser(BaseModel):
    """User document as returned by ``/api/auth/*``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., alias="_id")
    email: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    role: Role
    is_verified: bool | None = Field(default=None, alias="isVerified")
    is_active: bool | None = Field(default=None, alias="isActive")

    def to_entity(self) -> User:
        return User(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            role=self.role,
            is_verified=self.is_verified,
            is_active=self.is_active,
        )


@dataclass(frozen=True)
class AuthResult:
    token: str
    refresh_token: str
    user: User


class AuthApiClient(BackendClient):
    """Wrapper around the ``/api/auth`` endpoints."""

    error_class = AuthServiceError

    async def login(self, email: str, password: str) -> AuthResult:
        payload = await self._request(
            "POST", "/api/auth/login", json={"email": email, "password": password}
        )
        return _to_auth_result(payload)

    async def signup(self, user_data: dict[str, Any]) -> AuthResult:
        payload = await self._request("POST", "/api/auth/signup", json=user_data)
        return _to_auth_result(payload)

    async def refresh_token(self, refresh_token: str) -> str:
        payload = await self._request(
            "POST", "/api/auth/refresh-token", json={"refreshToken": refresh_token}
        )
        token = (payload.get("data") or {}).get("token")
        if not isinstance(token, str) or not token:
            raise AuthServiceError("Malformed refresh response from server")
        return token

    async def get_current_user(self, token: str) -> User:
        payload = await self._request("GET", "/api/auth/me", token=token)
        return _to_user(payload.get("data"))


def _to_user(data: Any) -> User:
    try:
        return BackendUser.model_validate(data).to_entity()
    except ValidationError as exc:
        logger.warning("Auth backend returned an invalid user: %s", exc)
        raise AuthServiceError("Malformed user in server response") from exc


def _to_auth_result(payload: dict[str, Any]) -> AuthResult:
    data = payload.get("data") or {}
    token = data.get("token")
    refresh_token = data.get("refreshToken")
    if not isinstance(token, str) or not isinstance(refresh_token, str):
        raise AuthServiceError("Malformed authentication response from server")
    return AuthResult(token=token, refresh_token=refresh_token, user=_to_user(data.get("user")))


__all__ = ["AuthApiClient", "AuthResult", "AuthServiceError", "BackendUser"]
