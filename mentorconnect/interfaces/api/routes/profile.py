"""Profile endpoints backed by the profile service."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, File, UploadFile, status

from mentorconnect.application.use_cases.pages import (
    alumni_profile_view,
    load_profile,
    student_profile_view,
    update_profile,
    upload_profile_image,
)
from mentorconnect.domain.entities import User
from mentorconnect.infrastructure.profile_client import ProfileApiClient, ProfileServiceError
from mentorconnect.interfaces.api.dependencies import (
    get_current_user,
    get_profile_client,
    get_session_token,
)
from mentorconnect.interfaces.api.routes_helpers import (
    backend_error,
    bad_request,
    select_or_raise,
)
from mentorconnect.interfaces.api.schemas import ProfileRead

router = APIRouter(prefix="/profile", tags=["profile"])
logger = logging.getLogger(__name__)


def _profile_read(user: User, profile: dict[str, Any]) -> ProfileRead:
    view = select_or_raise(
        user,
        student_view=lambda: student_profile_view(profile),
        alumni_view=lambda: alumni_profile_view(profile),
    )
    return ProfileRead.model_validate(view)


@router.get("", response_model=ProfileRead)
async def read_profile(
    current_user: User = Depends(get_current_user),
    token: str = Depends(get_session_token),
    client: ProfileApiClient = Depends(get_profile_client),
) -> ProfileRead:
    """Return the stored profile with the section layout of the user's role."""

    try:
        profile = await load_profile(client, token)
    except ProfileServiceError as exc:
        raise backend_error(exc, default_status=status.HTTP_502_BAD_GATEWAY) from exc
    return _profile_read(current_user, profile)


@router.put("", response_model=ProfileRead)
async def edit_profile(
    changes: dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user),
    token: str = Depends(get_session_token),
    client: ProfileApiClient = Depends(get_profile_client),
) -> ProfileRead:
    try:
        profile = await update_profile(client, token, changes)
    except ProfileServiceError as exc:
        raise backend_error(exc, default_status=status.HTTP_502_BAD_GATEWAY) from exc
    return _profile_read(current_user, profile)


@router.post("/image")
async def upload_image(
    image: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    token: str = Depends(get_session_token),
    client: ProfileApiClient = Depends(get_profile_client),
) -> dict[str, Any]:
    content = await image.read()
    try:
        return await upload_profile_image(
            client,
            token,
            filename=image.filename or "image",
            content=content,
            content_type=image.content_type,
        )
    except ValueError as exc:
        raise bad_request(exc) from exc
    except ProfileServiceError as exc:
        logger.warning("Profile image upload for %s failed: %s", current_user.email, exc)
        raise backend_error(exc, default_status=status.HTTP_502_BAD_GATEWAY) from exc


__all__ = ["router"]
