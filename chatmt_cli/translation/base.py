"""
翻訳エンジンの抽象基底クラス

全ての翻訳エンジン実装はこの基底クラスを継承する。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from .result import TranslationResult

UpdateCallback = Callable[[str], None]


class BaseTranslator(ABC):
    """翻訳エンジンの抽象基底クラス"""

    def __init__(self, **kwargs):
        """
        翻訳エンジンを初期化

        Args:
            **kwargs: サブクラス固有のパラメータ
        """

    @abstractmethod
    def translate(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        detected_lang: Optional[str] = None,
        on_update: Optional[UpdateCallback] = None,
    ) -> TranslationResult:
        """
        テキストを翻訳

        Args:
            text: 翻訳対象テキスト
            source_lang: ソース言語コード（ホストの言語コード）
            target_lang: ターゲット言語コード
            detected_lang: 言語検出の結果（無ければ None）
            on_update: 途中経過の通知先（ストリーミング時のみ呼ばれる）

        Returns:
            TranslationResult
        """
        ...

    async def translate_async(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        detected_lang: Optional[str] = None,
        on_update: Optional[UpdateCallback] = None,
    ) -> TranslationResult:
        """
        非同期翻訳（デフォルト実装）

        同期メソッドを asyncio.to_thread でラップ。
        サブクラスで真の非同期実装が必要な場合はオーバーライド可能。
        """
        import asyncio

        return await asyncio.to_thread(
            self.translate, text, source_lang, target_lang, detected_lang, on_update
        )

    @abstractmethod
    def get_translator_name(self) -> str:
        """
        翻訳エンジン名を取得

        Returns:
            翻訳エンジンの識別子（例: "openai_compat"）
        """
        ...

    def cleanup(self) -> None:
        """
        リソースのクリーンアップ

        HTTP クライアントの解放などを行う。
        サブクラスでオーバーライドして具体的な処理を実装する。
        """
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.cleanup()
