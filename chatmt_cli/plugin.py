"""Host-facing plugin entry point.

The host application calls :func:`translate` with its own configuration
bundle, an optional result callback for live updates and, optionally, its
HTTP client. The return value is the final translated text.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

import httpx

from .translation.impl.openai_compat import OpenAICompatTranslator

__all__ = ["translate", "translate_async"]


def translate(
    text: str,
    from_lang: str,
    to_lang: str,
    *,
    config: Mapping[str, Any],
    set_result: Optional[Callable[[str], None]] = None,
    detect: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> str:
    """Translate ``text`` and return the tag-stripped result.

    Raises:
        TranslationError: any fatal configuration, transport, API or
            response-structure failure.
    """
    translator = OpenAICompatTranslator(config=config, client=client)
    with translator:
        result = translator.translate(
            text, from_lang, to_lang, detected_lang=detect, on_update=set_result
        )
    return result.text


async def translate_async(
    text: str,
    from_lang: str,
    to_lang: str,
    *,
    config: Mapping[str, Any],
    set_result: Optional[Callable[[str], None]] = None,
    detect: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Async variant of :func:`translate`."""
    translator = OpenAICompatTranslator(config=config, async_client=client)
    result = await translator.translate_async(
        text, from_lang, to_lang, detected_lang=detect, on_update=set_result
    )
    return result.text
