"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status

from mentorconnect.application.use_cases.notifications import NotificationStore
from mentorconnect.application.use_cases.pages import PageRegistry
from mentorconnect.application.use_cases.session import AuthSession
from mentorconnect.domain.entities import User
from mentorconnect.infrastructure.llm_client import LocalChatService
from mentorconnect.infrastructure.profile_client import ProfileApiClient

from .state import AppState


def get_app_state(request: Request) -> AppState:
    """Return the state built by the application lifespan."""

    return request.app.state.mentorconnect


def get_auth_session(state: AppState = Depends(get_app_state)) -> AuthSession:
    return state.session


def get_notification_store(state: AppState = Depends(get_app_state)) -> NotificationStore:
    return state.notifications


def get_page_registry(state: AppState = Depends(get_app_state)) -> PageRegistry:
    return state.pages


def get_profile_client(state: AppState = Depends(get_app_state)) -> ProfileApiClient:
    return state.profile_client


def get_chat_service(state: AppState = Depends(get_app_state)) -> LocalChatService:
    return state.chat_service


def get_optional_user(session: AuthSession = Depends(get_auth_session)) -> User | None:
    """Return the signed-in user, or ``None`` when the session is not authenticated."""

    return session.user if session.is_authenticated else None


def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    """Return the signed-in user or reject the request."""

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user


def get_session_token(session: AuthSession = Depends(get_auth_session)) -> str:
    if not session.is_authenticated or not session.token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return session.token
