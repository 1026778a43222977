"""
マーカータグの除去

LLM が出力する ``<think>...</think>`` などの注釈タグを翻訳結果から取り除く。
"""

from __future__ import annotations

import re
from typing import List, Pattern

DEFAULT_REMOVE_TAGS = "<think>,<help>"


def parse_tag_names(remove_tags: str) -> List[str]:
    """
    カンマ区切りのタグ設定をタグ名のリストに変換

    ``<think>`` / ``think`` / ``</think>`` / ``<think/>`` はいずれも ``think`` になる。
    """
    names = []
    for tag in (remove_tags or "").split(","):
        name = tag.strip().strip("<>/").strip()
        if name:
            names.append(name)
    return names


def build_tag_pattern(name: str) -> Pattern[str]:
    """対タグ（非貪欲、複数行可）と自己終了タグの両方にマッチする正規表現"""
    escaped = re.escape(name)
    return re.compile(
        rf"<{escaped}\s*>.*?</{escaped}\s*>|<{escaped}\s*/>",
        re.DOTALL,
    )


class TagStripper:
    """
    設定されたタグを除去する

    ストリーミング中は蓄積済みテキスト全体に毎回適用される。閉じタグが
    まだ届いていない対タグは除去されず、届いた時点で表示から消える。

    Examples:
        >>> TagStripper("<think>,<help>").strip("<think>ignore</think>Hello<help/>")
        'Hello'
    """

    def __init__(self, remove_tags: str = DEFAULT_REMOVE_TAGS):
        self.tag_names = parse_tag_names(remove_tags)
        self._patterns = [build_tag_pattern(name) for name in self.tag_names]

    def strip(self, text: str) -> str:
        if not text:
            return ""
        for pattern in self._patterns:
            text = pattern.sub("", text)
        return text.strip()

    __call__ = strip
