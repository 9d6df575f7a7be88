"""Browser-style local storage backed by the application database."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.orm import Session

from mentorconnect.infrastructure.database import SessionLocal, storage_session
from mentorconnect.infrastructure.repositories import LocalStorageRepository

TOKEN_KEY = "token"
REFRESH_TOKEN_KEY = "refreshToken"


class LocalStorage:
    """Key/value storage that survives process restarts.

    Each call opens its own database session, so one instance can be shared by
    the whole process.
    """

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal) -> None:
        self._session_factory = session_factory

    def get_item(self, key: str) -> str | None:
        with storage_session(self._session_factory) as session:
            return LocalStorageRepository(session).get_item(key)

    def set_item(self, key: str, value: str) -> None:
        with storage_session(self._session_factory) as session:
            LocalStorageRepository(session).set_item(key, value)

    def remove_item(self, key: str) -> None:
        with storage_session(self._session_factory) as session:
            LocalStorageRepository(session).remove_item(key)


__all__ = ["LocalStorage", "REFRESH_TOKEN_KEY", "TOKEN_KEY"]
