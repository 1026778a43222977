"""
言語コードと表示名のユーティリティ

プロンプトの ``$from`` / ``$to`` に埋め込む言語名を求める。
翻訳エンジン本体は設定された language マップのみを参照し、ここで作る
デフォルトのマップは CLI などホスト側で使用する。
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

import langcodes

# 固定の表示名（langcodes の表記より LLM に伝わりやすいもの）
LANGUAGE_NAMES = {
    "ja": "Japanese",
    "en": "English",
    "zh": "Simplified Chinese",
    "zh-TW": "Traditional Chinese",
    "ko": "Korean",
    "de": "German",
    "fr": "French",
    "es": "Spanish",
    "pt": "Portuguese",
    "ru": "Russian",
    "ar": "Arabic",
}

# 言語コードではない特殊な値
SPECIAL_CODES = ("auto",)


def _normalize(code: str) -> str:
    return code.strip().replace("_", "-")


def get_language_name(code: str) -> str:
    """
    英語での言語名を取得

    Args:
        code: 言語コード（"ja", "zh_cn", "zh-TW" など）

    Returns:
        言語名（例: "Japanese"）。解釈できないコードはそのまま返す
    """
    if not code or code.lower() in SPECIAL_CODES:
        return code
    normalized = _normalize(code)
    # zh-TW は特別扱い
    if normalized.lower() in ("zh-tw", "zh-hant"):
        return LANGUAGE_NAMES["zh-TW"]
    try:
        language = langcodes.Language.get(normalized)
    except ValueError:
        return code
    if language.language in LANGUAGE_NAMES:
        return LANGUAGE_NAMES[language.language]
    try:
        # 未知の言語は langcodes から取得（language_data が必要）
        return language.display_name()
    except (ImportError, LookupError):
        return code


def build_language_map(
    codes: Iterable[Optional[str]],
    overrides: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """
    ホスト形式の language マップ（コード -> 表示名）を生成

    Args:
        codes: 対象の言語コード（None は無視）
        overrides: 優先する表示名

    Returns:
        言語コードをキーとした表示名の辞書
    """
    overrides = overrides or {}
    language_map: Dict[str, str] = {}
    for code in codes:
        if not code:
            continue
        language_map[code] = overrides.get(code) or get_language_name(code)
    return language_map
