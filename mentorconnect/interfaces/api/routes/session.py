"""Endpoints for the authentication session."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from mentorconnect.application.use_cases.session import AuthSession
from mentorconnect.infrastructure.auth_client import AuthServiceError
from mentorconnect.interfaces.api.dependencies import get_auth_session
from mentorconnect.interfaces.api.routes_helpers import backend_error
from mentorconnect.interfaces.api.schemas import (
    LoginRequest,
    RefreshResponse,
    SessionRead,
    SignupRequest,
)

router = APIRouter(prefix="/session", tags=["session"])
logger = logging.getLogger(__name__)


def _snapshot(session: AuthSession) -> SessionRead:
    return SessionRead.model_validate(session.snapshot())


@router.get("", response_model=SessionRead)
def read_session(session: AuthSession = Depends(get_auth_session)) -> SessionRead:
    """Return the current session state and user."""

    return _snapshot(session)


@router.post("/login", response_model=SessionRead)
async def login(
    payload: LoginRequest,
    session: AuthSession = Depends(get_auth_session),
) -> SessionRead:
    try:
        await session.login(payload.email, payload.password)
    except AuthServiceError as exc:
        raise backend_error(exc) from exc
    return _snapshot(session)


@router.post("/signup", response_model=SessionRead, status_code=201)
async def signup(
    payload: SignupRequest,
    session: AuthSession = Depends(get_auth_session),
) -> SessionRead:
    """Register with the auth backend and sign in with the returned tokens."""

    try:
        await session.signup(payload.to_backend_payload())
    except AuthServiceError as exc:
        raise backend_error(exc) from exc
    return _snapshot(session)


@router.post("/logout", response_model=SessionRead)
async def logout(session: AuthSession = Depends(get_auth_session)) -> SessionRead:
    await session.logout()
    return _snapshot(session)


@router.post("/refresh", response_model=RefreshResponse)
async def refresh(session: AuthSession = Depends(get_auth_session)) -> RefreshResponse:
    refreshed = await session.refresh_token()
    if not refreshed:
        logger.info("Token refresh did not succeed")
    return RefreshResponse(refreshed=refreshed)


__all__ = ["router"]
