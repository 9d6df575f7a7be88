"""HTTP client for the profile backend."""

from __future__ import annotations

from typing import Any

from .backend_client import BackendClient, BackendServiceError


class ProfileServiceError(BackendServiceError):
    """Raised when a profile request fails."""


class ProfileApiClient(BackendClient):
    """Wrapper around the ``/api/profile`` endpoints.

    Every call needs the session's access token.
    """

    error_class = ProfileServiceError

    async def get_profile(self, token: str) -> dict[str, Any]:
        payload = await self._request("GET", "/api/profile/me", token=token)
        return payload.get("profile") or {}

    async def update_profile(self, token: str, data: dict[str, Any]) -> dict[str, Any]:
        payload = await self._request("PUT", "/api/profile/update", token=token, json=data)
        return payload.get("profile") or {}

    async def upload_image(
        self,
        token: str,
        *,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> dict[str, Any]:
        files = {"image": (filename, content, content_type or "application/octet-stream")}
        return await self._request(
            "POST", "/api/profile/upload-image", token=token, files=files
        )


__all__ = ["ProfileApiClient", "ProfileServiceError"]
