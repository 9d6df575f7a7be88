"""Authentication session shared by every page of the companion service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import anyio

from mentorconnect.domain.entities import SessionSnapshot, SessionState, User
from mentorconnect.infrastructure.auth_client import (
    AuthApiClient,
    AuthResult,
    AuthServiceError,
)
from mentorconnect.infrastructure.local_storage import (
    REFRESH_TOKEN_KEY,
    TOKEN_KEY,
    LocalStorage,
)
from mentorconnect.infrastructure.security import token_expires_at

logger = logging.getLogger(__name__)


class AuthSession:
    """State machine over the persisted token pair and the signed-in user.

    Tokens are read from storage on construction. Refresh only happens when
    loading the current user fails; no expiry timer is kept.
    """

    def __init__(self, client: AuthApiClient, storage: LocalStorage) -> None:
        self._client = client
        self._storage = storage
        self._token = storage.get_item(TOKEN_KEY)
        self._refresh_token = storage.get_item(REFRESH_TOKEN_KEY)
        self._user: User | None = None
        self._state = SessionState.UNAUTHENTICATED
        self._cleared_listeners: list[Callable[[], None]] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token) and self._user is not None

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self._state,
            user=self._user,
            is_authenticated=self.is_authenticated,
            token_expires_at=token_expires_at(self._token),
        )

    def on_cleared(self, listener: Callable[[], None]) -> None:
        """Call ``listener`` whenever the session is cleared."""

        self._cleared_listeners.append(listener)

    async def restore(self) -> SessionSnapshot:
        """Load the current user for the stored token, refreshing it once if needed."""

        if not self._token:
            self._state = SessionState.UNAUTHENTICATED
            return self.snapshot()

        self._state = SessionState.LOADING
        try:
            user = await self._client.get_current_user(self._token)
        except AuthServiceError as exc:
            logger.warning("Failed to load user: %s", exc)
            self._state = SessionState.REFRESHING
            if not await self.refresh_token():
                await self.clear()
                return self.snapshot()

            self._state = SessionState.LOADING
            try:
                user = await self._client.get_current_user(self._token)
            except AuthServiceError as retry_exc:
                logger.warning("Failed to load user after refresh: %s", retry_exc)
                await self.clear()
                return self.snapshot()

        self._user = user
        self._state = SessionState.AUTHENTICATED
        return self.snapshot()

    async def login(self, email: str, password: str) -> User:
        previous = self._state
        self._state = SessionState.LOADING
        try:
            result = await self._client.login(email, password)
        except AuthServiceError:
            self._state = previous
            raise
        return await self._establish(result)

    async def signup(self, user_data: dict[str, Any]) -> User:
        previous = self._state
        self._state = SessionState.LOADING
        logger.info("Attempting signup for %s", user_data.get("email"))
        try:
            result = await self._client.signup(user_data)
        except AuthServiceError as exc:
            logger.error("Signup failed: %s", exc)
            self._state = previous
            raise
        return await self._establish(result)

    async def logout(self) -> None:
        await self.clear()

    async def refresh_token(self) -> bool:
        if not self._refresh_token:
            return False
        try:
            token = await self._client.refresh_token(self._refresh_token)
        except AuthServiceError as exc:
            logger.error("Failed to refresh token: %s", exc)
            return False

        await anyio.to_thread.run_sync(self._storage.set_item, TOKEN_KEY, token)
        self._token = token
        return True

    async def clear(self) -> None:
        """Forget both tokens and the user."""

        await anyio.to_thread.run_sync(self._forget_tokens)
        self._token = None
        self._refresh_token = None
        self._user = None
        self._state = SessionState.UNAUTHENTICATED
        for listener in list(self._cleared_listeners):
            listener()

    async def _establish(self, result: AuthResult) -> User:
        await anyio.to_thread.run_sync(self._store_tokens, result)
        self._token = result.token
        self._refresh_token = result.refresh_token
        self._user = result.user
        self._state = SessionState.AUTHENTICATED
        return result.user

    # Storage is a blocking database call, so it runs in a worker thread.
    def _store_tokens(self, result: AuthResult) -> None:
        self._storage.set_item(TOKEN_KEY, result.token)
        self._storage.set_item(REFRESH_TOKEN_KEY, result.refresh_token)

    def _forget_tokens(self) -> None:
        self._storage.remove_item(TOKEN_KEY)
        self._storage.remove_item(REFRESH_TOKEN_KEY)


__all__ = ["AuthSession"]
