"""
翻訳エンジンのファクトリー

TranslatorFactory は翻訳エンジンを作成するためのファクトリークラス。
メタデータに登録されたモジュールを動的にインポートする。
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from .metadata import TranslatorMetadata

if TYPE_CHECKING:
    from .base import BaseTranslator


class TranslatorFactory:
    """翻訳エンジンを作成するファクトリークラス"""

    @classmethod
    def create_translator(
        cls,
        translator_type: str,
        **translator_options,
    ) -> BaseTranslator:
        """
        指定されたタイプの翻訳エンジンを作成

        Args:
            translator_type: 翻訳エンジンタイプ
                利用可能: openai_compat
            **translator_options: エンジン固有のパラメータ（config, client など）

        Returns:
            BaseTranslator のインスタンス

        Raises:
            ValueError: 不明な翻訳エンジンタイプが指定された場合
            ConfigurationError: 設定が不正な場合

        Examples:
            >>> translator = TranslatorFactory.create_translator(
            ...     "openai_compat",
            ...     config={"apiKey": "sk-...", "requestPath": "api.openai.com/v1"},
            ... )
        """
        metadata = TranslatorMetadata.get(translator_type)
        if metadata is None:
            available = list(TranslatorMetadata.get_all().keys())
            raise ValueError(
                f"Unknown translator type: {translator_type}. " f"Available: {available}"
            )

        module = importlib.import_module(metadata.module, package="chatmt_cli.translation")
        translator_class = getattr(module, metadata.class_name)
        return translator_class(**translator_options)

