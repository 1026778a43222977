"""
プロンプトテンプレートの展開

``$text`` / ``$from`` / ``$to`` / ``$detect`` のプレースホルダーを置換して
system / user の 2 メッセージを組み立てる。
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

# 置換順序（各プレースホルダーは最初の 1 箇所のみ置換される）
SYSTEM_PLACEHOLDERS = ("$to", "$from", "$detect")
USER_PLACEHOLDERS = ("$text", "$to", "$from", "$detect")


def resolve_language(code: Optional[str], language_map: Mapping[str, str]) -> str:
    """言語コードを表示名に変換。マップに無ければコードをそのまま返す"""
    if not code:
        return ""
    return language_map.get(code) or code


def render_template(template: str, values: Mapping[str, str], order: tuple) -> str:
    """
    テンプレートを順番に置換

    str.replace(..., 1) による逐次置換。先に挿入した値の中にプレースホルダーが
    含まれていれば、後続の置換の対象になる。エスケープは行わない。
    """
    rendered = template
    for placeholder in order:
        rendered = rendered.replace(placeholder, values[placeholder], 1)
    return rendered


def build_messages(
    system_template: str,
    user_template: str,
    text: str,
    source_lang: str,
    target_lang: str,
    detected_lang: Optional[str] = None,
    language_map: Optional[Mapping[str, str]] = None,
) -> List[Dict[str, str]]:
    """
    チャットメッセージを生成

    Args:
        system_template: system プロンプトのテンプレート
        user_template: user プロンプトのテンプレート
        text: 翻訳対象テキスト
        source_lang: ソース言語コード
        target_lang: ターゲット言語コード
        detected_lang: 検出された言語コード（無ければソース言語を使用）
        language_map: 言語コード -> 表示名

    Returns:
        [system, user] の 2 要素リスト
    """
    language_map = language_map or {}
    source_name = resolve_language(source_lang, language_map)
    values = {
        "$text": text,
        "$from": source_name,
        "$to": resolve_language(target_lang, language_map),
        "$detect": resolve_language(detected_lang, language_map) or source_name,
    }
    return [
        {"role": "system", "content": render_template(system_template, values, SYSTEM_PLACEHOLDERS)},
        {"role": "user", "content": render_template(user_template, values, USER_PLACEHOLDERS)},
    ]
