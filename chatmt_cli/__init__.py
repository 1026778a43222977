"""Canonical re-exports for the chatmt-cli public API surface.

- translate / translate_async: host-facing plugin entry points returning str
- OpenAICompatTranslator: translator backed by an OpenAI-compatible endpoint
- TranslatorFactory, TranslationResult: plugin system entry points
"""

from .plugin import translate, translate_async
from .translation import (
    APIError,
    BaseTranslator,
    ConfigurationError,
    ResponseStructureError,
    TranslationError,
    TranslationNetworkError,
    TranslationResult,
    TranslatorFactory,
    TranslatorSettings,
)
from .translation.impl.openai_compat import OpenAICompatTranslator

__version__ = "0.1.0"

__all__ = [
    "translate",
    "translate_async",
    "OpenAICompatTranslator",
    "BaseTranslator",
    "TranslationResult",
    "TranslatorFactory",
    "TranslatorSettings",
    "TranslationError",
    "ConfigurationError",
    "TranslationNetworkError",
    "APIError",
    "ResponseStructureError",
]
