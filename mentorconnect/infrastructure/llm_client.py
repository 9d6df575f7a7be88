"""Client for the local LLM server (Ollama wire format)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Mapping

import httpx

logger = logging.getLogger(__name__)

APOLOGY_MESSAGE = (
    "I'm sorry, I'm having trouble responding right now. Please try again later."
)
NO_RESPONSE_TEXT = "No response"
UNREACHABLE_MESSAGE = "Error connecting to the local LLM service."


class LocalChatService:
    """Chat and completion calls against a local model.

    Failures never propagate: chat falls back to :data:`APOLOGY_MESSAGE` and
    generate to :data:`UNREACHABLE_MESSAGE`.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        model: str,
        temperature: float = 0.7,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature

    @property
    def model(self) -> str:
        return self._model

    async def is_available(self) -> bool:
        try:
            response = await self._client.get("/api/tags")
        except httpx.HTTPError as exc:
            logger.info("Local LLM is not reachable: %s", exc)
            return False
        return response.is_success

    async def chat(self, messages: Sequence[Mapping[str, str]]) -> str:
        body = {
            "model": self._model,
            "messages": [dict(message) for message in messages],
            "stream": False,
            "options": {"temperature": self._temperature},
        }
        try:
            response = await self._client.post("/api/chat", json=body)
            response.raise_for_status()
            content = _extract_chat_content(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Local LLM chat failed: %s", exc)
            return APOLOGY_MESSAGE
        return content

    async def generate(self, prompt: str) -> str:
        body = {"model": self._model, "prompt": prompt, "stream": False}
        try:
            response = await self._client.post("/api/generate", json=body)
        except httpx.HTTPError as exc:
            logger.warning("Local LLM generate failed: %s", exc)
            return UNREACHABLE_MESSAGE

        try:
            data = response.json()
        except ValueError:
            data = None
        text = data.get("response") if isinstance(data, dict) else None
        return text if isinstance(text, str) and text else NO_RESPONSE_TEXT


def _extract_chat_content(data: Any) -> str:
    message = data.get("message") if isinstance(data, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str) or not content.strip():
        raise ValueError("Chat response did not include any content")
    return content


__all__ = [
    "APOLOGY_MESSAGE",
    "LocalChatService",
    "NO_RESPONSE_TEXT",
    "UNREACHABLE_MESSAGE",
]
