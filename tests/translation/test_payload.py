"""
レスポンス解析のテスト
"""

from __future__ import annotations

import pytest

from chatmt_cli.translation.exceptions import ResponseStructureError, StreamParseError
from chatmt_cli.translation.payload import (
    CompletionContent,
    ErrorPayload,
    MalformedPayload,
    parse_completion,
    parse_error_body,
    parse_stream_delta,
    require_content,
)


class TestParseCompletion:
    """parse_completion のテスト"""

    def test_content(self):
        payload = parse_completion({"choices": [{"message": {"content": "Hello"}}]})
        assert payload == CompletionContent(content="Hello")

    @pytest.mark.parametrize(
        "data",
        [
            None,
            [],
            {},
            {"choices": []},
            {"choices": "x"},
            {"choices": [None]},
            {"choices": [{}]},
            {"choices": [{"message": None}]},
            {"choices": [{"message": {"content": None}}]},
            {"choices": [{"message": {"content": ""}}]},
            {"choices": [{"message": {"content": 42}}]},
        ],
    )
    def test_malformed(self, data):
        assert isinstance(parse_completion(data), MalformedPayload)

    def test_error_body_on_success_status(self):
        """200 でも error を含む場合は ErrorPayload"""
        payload = parse_completion({"error": {"message": "quota exceeded"}})
        assert isinstance(payload, ErrorPayload)
        assert "quota exceeded" in payload.details


class TestParseErrorBody:
    """parse_error_body のテスト"""

    def test_json_body(self):
        payload = parse_error_body('{"error": {"message": "Invalid API key"}}')
        assert payload.body == {"error": {"message": "Invalid API key"}}
        assert '"message": "Invalid API key"' in payload.details

    def test_text_body(self):
        """JSON でなければ生テキスト"""
        payload = parse_error_body("<html>Bad Gateway</html>")
        assert payload.details == "<html>Bad Gateway</html>"

    def test_non_ascii_kept(self):
        payload = parse_error_body('{"error": "無効なキー"}')
        assert "無効なキー" in payload.details


class TestParseStreamDelta:
    """parse_stream_delta のテスト"""

    def test_content(self):
        assert parse_stream_delta('{"choices":[{"delta":{"content":"Hi"}}]}') == "Hi"

    def test_first_choice_only(self):
        data = '{"choices":[{"delta":{"content":"a"}},{"delta":{"content":"b"}}]}'
        assert parse_stream_delta(data) == "a"

    @pytest.mark.parametrize(
        "data",
        [
            '{"choices":[]}',
            '{"choices":[{"delta":{"role":"assistant"}}]}',
            '{"choices":[{"delta":{"content":null}}]}',
            '{"usage":{"total_tokens":3}}',
        ],
    )
    def test_no_content(self, data):
        assert parse_stream_delta(data) is None

    def test_invalid_json_raises(self):
        with pytest.raises(StreamParseError) as exc_info:
            parse_stream_delta("{oops")
        assert exc_info.value.line == "{oops"

    def test_non_object_raises(self):
        with pytest.raises(StreamParseError, match="expected object"):
            parse_stream_delta("[1]")


class TestRequireContent:
    """require_content のテスト"""

    def test_content(self):
        assert require_content(CompletionContent("x")) == "x"

    def test_malformed_raises_with_payload(self):
        with pytest.raises(ResponseStructureError) as exc_info:
            require_content(MalformedPayload(raw={"choices": []}))
        assert exc_info.value.payload == {"choices": []}
        assert "Invalid response structure" in str(exc_info.value)

    def test_raw_text_in_message(self):
        with pytest.raises(ResponseStructureError, match="not json"):
            require_content(MalformedPayload(raw="not json"))

    def test_error_payload_raises(self):
        with pytest.raises(ResponseStructureError, match="quota"):
            require_content(ErrorPayload(details='{"error": "quota"}', body={"error": "quota"}))
