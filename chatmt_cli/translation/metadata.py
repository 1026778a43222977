"""
翻訳エンジンのメタデータ管理

翻訳エンジンの登録情報とファクトリー生成用メタデータを管理する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class TranslatorInfo:
    """翻訳エンジンのメタデータ"""

    translator_id: str
    display_name: str
    description: str
    module: str  # e.g., ".impl.openai_compat"
    class_name: str  # e.g., "OpenAICompatTranslator"
    supports_streaming: bool = False  # 途中経過の通知に対応しているか


class TranslatorMetadata:
    """翻訳エンジンのメタデータ管理"""

    _TRANSLATORS: Dict[str, TranslatorInfo] = {
        "openai_compat": TranslatorInfo(
            translator_id="openai_compat",
            display_name="OpenAI-compatible Chat Completions",
            description="Any endpoint implementing POST /chat/completions (OpenAI, DeepSeek, Ollama, vLLM)",
            module=".impl.openai_compat",
            class_name="OpenAICompatTranslator",
            supports_streaming=True,
        ),
    }

    @classmethod
    def get(cls, translator_id: str) -> Optional[TranslatorInfo]:
        """
        翻訳エンジンのメタデータを取得

        Args:
            translator_id: 翻訳エンジンID

        Returns:
            TranslatorInfo、見つからない場合は None
        """
        return cls._TRANSLATORS.get(translator_id)

    @classmethod
    def get_all(cls) -> Dict[str, TranslatorInfo]:
        """
        全ての翻訳エンジンメタデータを取得

        Returns:
            翻訳エンジンID をキーとした TranslatorInfo の辞書
        """
        return cls._TRANSLATORS.copy()

