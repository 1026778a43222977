"""
翻訳結果のデータクラス

翻訳処理の結果を格納する。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TranslationResult:
    """翻訳結果"""

    text: str  # 翻訳テキスト（タグ除去・前後空白除去済み、空文字列もあり得る）
    original_text: str  # 原文
    source_lang: str  # ソース言語
    target_lang: str  # ターゲット言語
    model: str = ""  # 使用したモデル名
    streamed: bool = False  # ストリーミングで取得したか

    def __str__(self) -> str:
        return self.text
