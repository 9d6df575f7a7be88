"""Domain values describing the authentication session lifecycle."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .user import User


class SessionState(str, Enum):
    """States of the authentication session.

    ``UNAUTHENTICATED -> LOADING -> AUTHENTICATED`` is the happy path.
    ``REFRESHING`` is entered only when loading the current user fails and a
    refresh token is tried; failure there ends in ``UNAUTHENTICATED``.
    """

    UNAUTHENTICATED = "unauthenticated"
    LOADING = "loading"
    REFRESHING = "refreshing"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session handed to consumers."""

    state: SessionState
    user: User | None
    is_authenticated: bool
    token_expires_at: datetime | None = None

    @property
    def loading(self) -> bool:
        return self.state in (SessionState.LOADING, SessionState.REFRESHING)


__all__ = ["SessionSnapshot", "SessionState"]
