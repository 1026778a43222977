"""
翻訳プラグインシステム

OpenAI 互換の Chat Completions エンドポイントに翻訳を委譲する。
プロンプトテンプレートの展開、SSE ストリームの逐次デコード、
マーカータグの除去を提供する。

Usage:
    from chatmt_cli.translation import TranslatorFactory

    translator = TranslatorFactory.create_translator(
        "openai_compat",
        config={
            "apiKey": "sk-...",
            "requestPath": "api.openai.com/v1",
            "use_stream": "true",
        },
    )
    result = translator.translate("こんにちは", "ja", "en", on_update=print)
    print(result.text)  # "Hello"
"""

from __future__ import annotations

from .base import BaseTranslator
from .endpoint import normalize_endpoint
from .exceptions import (
    APIError,
    ConfigurationError,
    ResponseStructureError,
    StreamParseError,
    TranslationError,
    TranslationNetworkError,
)
from .factory import TranslatorFactory
from .lang_codes import build_language_map, get_language_name
from .metadata import TranslatorInfo, TranslatorMetadata
from .parameters import FALLBACK_PARAMETERS, build_request_body, parse_parameters
from .prompts import build_messages
from .result import TranslationResult
from .settings import TranslatorSettings
from .stream import DoneBehavior, StreamConsumer, StreamState, consume_stream, feed_chunk
from .tags import TagStripper

__all__ = [
    # Core classes
    "BaseTranslator",
    "TranslationResult",
    "TranslatorFactory",
    "TranslatorMetadata",
    "TranslatorInfo",
    "TranslatorSettings",
    # Exceptions
    "TranslationError",
    "ConfigurationError",
    "TranslationNetworkError",
    "APIError",
    "ResponseStructureError",
    "StreamParseError",
    # Request assembly
    "normalize_endpoint",
    "build_messages",
    "parse_parameters",
    "build_request_body",
    "FALLBACK_PARAMETERS",
    # Response post-processing
    "TagStripper",
    "DoneBehavior",
    "StreamState",
    "StreamConsumer",
    "feed_chunk",
    "consume_stream",
    # Language code utilities
    "get_language_name",
    "build_language_map",
]
