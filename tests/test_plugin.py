"""Tests for the host-facing plugin entry points."""

from __future__ import annotations

import asyncio

import pytest

from chatmt_cli import plugin
from chatmt_cli.translation.exceptions import APIError, ConfigurationError
from tests.utils.http_mock import (
    completion_body,
    json_handler,
    make_config,
    sse_event,
    sse_handler,
)


def test_translate_returns_text() -> None:
    handler = json_handler(completion_body("<think>hmm</think>Hello"))
    text = plugin.translate(
        "こんにちは", "ja", "en", config=make_config(), client=handler.client()
    )
    assert text == "Hello"


def test_translate_streams_to_set_result() -> None:
    updates: list[str] = []
    handler = sse_handler([sse_event("Hel"), sse_event("lo"), "data: [DONE]\n"])
    text = plugin.translate(
        "x",
        "ja",
        "en",
        config=make_config(use_stream="true"),
        set_result=updates.append,
        client=handler.client(),
    )
    assert text == "Hello"
    assert updates[-1] == "Hello"


def test_translate_uses_detected_language() -> None:
    handler = json_handler(completion_body("ok"))
    plugin.translate(
        "x",
        "auto",
        "en",
        config=make_config(system_prompt="Source is $detect", language={"fr": "French"}),
        detect="fr",
        client=handler.client(),
    )
    assert handler.last_json["messages"][0]["content"] == "Source is French"


def test_translate_missing_api_key() -> None:
    handler = json_handler(completion_body("unused"))
    with pytest.raises(ConfigurationError):
        plugin.translate("x", "ja", "en", config={"requestPath": "api.example.com"}, client=handler.client())
    assert handler.requests == []


def test_translate_async() -> None:
    handler = json_handler({"error": "bad"}, status_code=400)

    async def run_test() -> str:
        return await plugin.translate_async(
            "x", "ja", "en", config=make_config(), client=handler.async_client()
        )

    with pytest.raises(APIError) as exc_info:
        asyncio.run(run_test())
    assert exc_info.value.status_code == 400
