"""Tests for the local LLM chat client."""

from __future__ import annotations

import json

import anyio
import httpx

from mentorconnect.infrastructure.llm_client import (
    APOLOGY_MESSAGE,
    NO_RESPONSE_TEXT,
    UNREACHABLE_MESSAGE,
    LocalChatService,
)


def _call(handler, operation):
    async def main():
        async with httpx.AsyncClient(
            base_url="http://llm.test", transport=httpx.MockTransport(handler)
        ) as client:
            service = LocalChatService(client, model="llama3.2", temperature=0.2)
            return await operation(service)

    return anyio.run(main)


def test_chat_returns_message_content() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"message": {"role": "assistant", "content": "Hi!"}})

    reply = _call(handler, lambda service: service.chat([{"role": "user", "content": "Hello"}]))

    assert reply == "Hi!"
    assert seen["path"] == "/api/chat"
    assert seen["body"] == {
        "model": "llama3.2",
        "messages": [{"role": "user", "content": "Hello"}],
        "stream": False,
        "options": {"temperature": 0.2},
    }


def test_chat_apologises_on_server_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "model not loaded"})

    assert _call(handler, lambda service: service.chat([])) == APOLOGY_MESSAGE


def test_chat_apologises_when_unreachable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    assert _call(handler, lambda service: service.chat([])) == APOLOGY_MESSAGE


def test_chat_apologises_on_empty_content() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"message": {"role": "assistant", "content": "  "}})

    assert _call(handler, lambda service: service.chat([])) == APOLOGY_MESSAGE


def test_is_available_reflects_tags_endpoint() -> None:
    def up(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"models": []})

    def down(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    assert _call(up, lambda service: service.is_available()) is True
    assert _call(down, lambda service: service.is_available()) is False


def test_generate_returns_response_or_placeholder() -> None:
    def answer(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"response": "Generated text"})

    def empty(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"response": ""})

    def down(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    assert _call(answer, lambda service: service.generate("Prompt")) == "Generated text"
    assert _call(empty, lambda service: service.generate("Prompt")) == NO_RESPONSE_TEXT
    assert _call(down, lambda service: service.generate("Prompt")) == UNREACHABLE_MESSAGE
