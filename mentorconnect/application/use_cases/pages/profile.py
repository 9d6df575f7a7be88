"""Profile page: role layout and calls to the profile backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mentorconnect.infrastructure.profile_client import ProfileApiClient

STUDENT_SECTIONS: tuple[str, ...] = (
    "basic_info",
    "education",
    "career_goals",
    "skills",
    "projects",
    "social_links",
    "mentorship_preferences",
)

ALUMNI_SECTIONS: tuple[str, ...] = (
    "basic_info",
    "professional",
    "experience",
    "education",
    "skills",
    "mentorship_preferences",
    "achievements",
    "social_links",
)


@dataclass(frozen=True)
class ProfileView:
    """Profile document from the backend and the sections the role shows."""

    layout: str
    sections: tuple[str, ...]
    profile: dict[str, Any]


def student_profile_view(profile: dict[str, Any]) -> ProfileView:
    return ProfileView(layout="student", sections=STUDENT_SECTIONS, profile=profile)


def alumni_profile_view(profile: dict[str, Any]) -> ProfileView:
    return ProfileView(layout="alumni", sections=ALUMNI_SECTIONS, profile=profile)


async def load_profile(client: ProfileApiClient, token: str) -> dict[str, Any]:
    return await client.get_profile(token)


async def update_profile(
    client: ProfileApiClient, token: str, changes: dict[str, Any]
) -> dict[str, Any]:
    """Send ``changes`` to the backend and return the stored profile."""

    return await client.update_profile(token, changes)


async def upload_profile_image(
    client: ProfileApiClient,
    token: str,
    *,
    filename: str,
    content: bytes,
    content_type: str | None = None,
) -> dict[str, Any]:
    if not content:
        raise ValueError("Image file is empty")
    return await client.upload_image(
        token, filename=filename, content=content, content_type=content_type
    )


__all__ = [
    "ALUMNI_SECTIONS",
    "ProfileView",
    "STUDENT_SECTIONS",
    "alumni_profile_view",
    "load_profile",
    "student_profile_view",
    "update_profile",
    "upload_profile_image",
]
