"""Schemas for the authentication session endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from mentorconnect.domain.entities import Role, SessionState


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class SignupRequest(BaseModel):
    """Registration payload forwarded to the auth backend."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    email: EmailStr
    password: str = Field(..., min_length=1)
    first_name: str = Field(..., alias="firstName", min_length=1)
    last_name: str = Field(..., alias="lastName", min_length=1)
    role: Role

    def to_backend_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    first_name: str
    last_name: str
    role: Role
    is_verified: bool | None = None
    is_active: bool | None = None


class SessionRead(BaseModel):
    """Snapshot of the authentication session."""

    model_config = ConfigDict(from_attributes=True)

    state: SessionState
    user: UserRead | None = None
    is_authenticated: bool
    loading: bool
    token_expires_at: datetime | None = None


class RefreshResponse(BaseModel):
    refreshed: bool


__all__ = ["LoginRequest", "RefreshResponse", "SessionRead", "SignupRequest", "UserRead"]
