"""
マーカータグ除去のテスト
"""

from __future__ import annotations

import pytest

from chatmt_cli.translation.tags import DEFAULT_REMOVE_TAGS, TagStripper, parse_tag_names


class TestParseTagNames:
    """parse_tag_names のテスト"""

    def test_default(self):
        assert parse_tag_names(DEFAULT_REMOVE_TAGS) == ["think", "help"]

    @pytest.mark.parametrize("raw", ["think", "<think>", "</think>", "<think/>", " <think> "])
    def test_forms(self, raw):
        """括弧やスラッシュの有無に関係なくタグ名を取り出す"""
        assert parse_tag_names(raw) == ["think"]

    def test_empty_entries_ignored(self):
        assert parse_tag_names(" , <a>,, ") == ["a"]

    def test_empty(self):
        assert parse_tag_names("") == []


class TestTagStripper:
    """TagStripper のテスト"""

    def test_paired_and_self_closing(self):
        """対タグと自己終了タグの両方を除去"""
        stripper = TagStripper("<think>,<help>")
        assert stripper.strip("<think>ignore</think>Hello<help/>") == "Hello"

    def test_multiline_content(self):
        """複数行にまたがる対タグ"""
        stripper = TagStripper("<think>")
        text = "<think>\nstep 1\nstep 2\n</think>\n\nBonjour"
        assert stripper.strip(text) == "Bonjour"

    def test_non_greedy(self):
        """対タグは非貪欲マッチ"""
        stripper = TagStripper("<help>")
        assert stripper.strip("<help>a</help>keep<help>b</help>") == "keep"

    def test_unclosed_tag_kept(self):
        """閉じタグが無い場合は除去しない"""
        stripper = TagStripper("<think>")
        assert stripper.strip("<think>still thinking") == "<think>still thinking"

    def test_self_closing_with_space(self):
        stripper = TagStripper("<br>")
        assert stripper.strip("a<br />b") == "ab"

    def test_regex_metacharacters_escaped(self):
        """タグ名は正規表現としてではなく文字列として扱う"""
        stripper = TagStripper("<a.b>")
        assert stripper.strip("<a.b>x</a.b>y<axb>z</axb>") == "y<axb>z</axb>"

    def test_other_tags_untouched(self):
        stripper = TagStripper("<think>")
        assert stripper.strip("<b>bold</b>") == "<b>bold</b>"

    def test_trims_whitespace(self):
        stripper = TagStripper("")
        assert stripper.strip("  Hello \n") == "Hello"

    def test_empty_text(self):
        assert TagStripper().strip("") == ""

    def test_callable(self):
        stripper = TagStripper()
        assert stripper("<think>x</think> Hi") == "Hi"
