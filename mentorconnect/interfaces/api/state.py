"""Process-wide objects shared by every request."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from mentorconnect.application.use_cases.notifications import NotificationState, NotificationStore
from mentorconnect.application.use_cases.pages import PageRegistry
from mentorconnect.application.use_cases.session import AuthSession
from mentorconnect.config import Settings
from mentorconnect.infrastructure import database
from mentorconnect.infrastructure.auth_client import AuthApiClient
from mentorconnect.infrastructure.backend_client import create_http_client
from mentorconnect.infrastructure.llm_client import LocalChatService
from mentorconnect.infrastructure.local_storage import LocalStorage
from mentorconnect.infrastructure.notifications import (
    NotificationConnectionManager,
    NotificationPublisher,
)
from mentorconnect.infrastructure.profile_client import ProfileApiClient

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Everything one running companion service owns.

    Stands in for a single browser tab: one session, one notification store
    and one set of page states.
    """

    settings: Settings
    backend_http: httpx.AsyncClient
    llm_http: httpx.AsyncClient
    auth_client: AuthApiClient
    profile_client: ProfileApiClient
    chat_service: LocalChatService
    session: AuthSession
    notifications: NotificationStore
    connections: NotificationConnectionManager
    pages: PageRegistry


def build_app_state(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppState:
    backend_http = create_http_client(
        settings.auth_api_url,
        timeout=settings.request_timeout_seconds,
        transport=transport,
    )
    llm_http = create_http_client(
        settings.llm_base_url,
        timeout=settings.request_timeout_seconds,
        transport=transport,
    )
    auth_client = AuthApiClient(backend_http)
    session = AuthSession(auth_client, LocalStorage(database.SessionLocal))

    connections = NotificationConnectionManager()
    publisher = NotificationPublisher(connections)
    notifications = NotificationStore(fetch_delay=settings.notification_fetch_delay_seconds)

    def _publish(state: NotificationState) -> None:
        publisher.dispatch(state.notifications, unread_count=state.unread_count)

    notifications.subscribe(_publish)

    pages = PageRegistry(fetch_delay=settings.page_fetch_delay_seconds)
    session.on_cleared(pages.clear)

    return AppState(
        settings=settings,
        backend_http=backend_http,
        llm_http=llm_http,
        auth_client=auth_client,
        profile_client=ProfileApiClient(backend_http),
        chat_service=LocalChatService(
            llm_http,
            model=settings.llm_model,
            temperature=settings.llm_temperature,
        ),
        session=session,
        notifications=notifications,
        connections=connections,
        pages=pages,
    )


async def close_app_state(state: AppState) -> None:
    """Release the HTTP clients and drop in-memory state."""

    state.notifications.reset()
    state.connections.reset()
    state.pages.clear()
    await state.backend_http.aclose()
    await state.llm_http.aclose()
    logger.debug("Application state closed")


__all__ = ["AppState", "build_app_state", "close_app_state"]
