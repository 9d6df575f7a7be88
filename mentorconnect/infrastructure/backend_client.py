"""Shared plumbing for the REST backends reached over HTTP."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

NO_RESPONSE_MESSAGE = (
    "No response from server. Please check your connection and try again."
)


class BackendServiceError(RuntimeError):
    """Raised when a backend call fails.

    ``status_code`` is ``None`` when no response was received at all.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def no_response(self) -> bool:
        return self.status_code is None


def create_http_client(
    base_url: str,
    *,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Return an ``AsyncClient`` bound to ``base_url``."""

    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        transport=transport,
        headers={"Accept": "application/json"},
    )


class BackendClient:
    """Base class issuing JSON requests and translating failures."""

    error_class: type[BackendServiceError] = BackendServiceError

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def _request(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        headers = dict(kwargs.pop("headers", None) or {})
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = await self._client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed without a response: %s", method, path, exc)
            raise self.error_class(NO_RESPONSE_MESSAGE) from exc

        logger.debug("%s %s -> %s", method, path, response.status_code)
        payload = _json_body(response)
        if response.is_error:
            message = payload.get("message") if isinstance(payload, dict) else None
            logger.warning(
                "%s %s returned %s: %s", method, path, response.status_code, message
            )
            raise self.error_class(
                str(message or f"Request failed with status {response.status_code}"),
                status_code=response.status_code,
            )
        if not isinstance(payload, dict):
            raise self.error_class(
                "Malformed response from server", status_code=response.status_code
            )
        return payload


def _json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


__all__ = [
    "BackendClient",
    "BackendServiceError",
    "NO_RESPONSE_MESSAGE",
    "create_http_client",
]
