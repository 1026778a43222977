"""
言語コードユーティリティのテスト
"""

from __future__ import annotations

from chatmt_cli.translation.lang_codes import build_language_map, get_language_name


class TestGetLanguageName:
    """get_language_name のテスト"""

    def test_known_names(self):
        assert get_language_name("ja") == "Japanese"
        assert get_language_name("en") == "English"

    def test_region_subtag(self):
        """地域サブタグ付きでも言語名を返す"""
        assert get_language_name("zh-CN") == "Simplified Chinese"
        assert get_language_name("en-US") == "English"

    def test_underscore_codes(self):
        """ホストの zh_cn 形式"""
        assert get_language_name("zh_cn") == "Simplified Chinese"
        assert get_language_name("zh_tw") == "Traditional Chinese"

    def test_auto_kept(self):
        """auto は言語コードではないのでそのまま"""
        assert get_language_name("auto") == "auto"

    def test_empty(self):
        assert get_language_name("") == ""


class TestBuildLanguageMap:
    """build_language_map のテスト"""

    def test_basic(self):
        assert build_language_map(["ja", "en"]) == {"ja": "Japanese", "en": "English"}

    def test_none_skipped(self):
        assert build_language_map(["ja", None]) == {"ja": "Japanese"}

    def test_overrides(self):
        """overrides の表示名を優先"""
        language_map = build_language_map(["ja", "en"], overrides={"ja": "日本語"})
        assert language_map == {"ja": "日本語", "en": "English"}
