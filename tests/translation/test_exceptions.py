"""
翻訳例外クラスのテスト
"""

from __future__ import annotations

import pytest

from chatmt_cli.translation.exceptions import (
    APIError,
    ConfigurationError,
    ResponseStructureError,
    StreamParseError,
    TranslationError,
    TranslationNetworkError,
)


class TestExceptionHierarchy:
    """例外クラス階層のテスト"""

    @pytest.mark.parametrize(
        "error_class",
        [ConfigurationError, TranslationNetworkError, APIError, ResponseStructureError],
    )
    def test_fatal_errors_are_translation_errors(self, error_class):
        """呼び出し元に送出される例外は TranslationError のサブクラス"""
        assert issubclass(error_class, TranslationError)

    def test_stream_parse_error_is_not_translation_error(self):
        """StreamParseError は内部で処理されるため TranslationError ではない"""
        assert not issubclass(StreamParseError, TranslationError)


class TestAPIError:
    """APIError のテスト"""

    def test_message(self):
        error = APIError(401, '{"error": "invalid key"}')
        assert str(error) == 'API Request Failed\nStatus: 401\nDetails: {"error": "invalid key"}'

    def test_attributes(self):
        error = APIError(429, "slow down")
        assert error.status_code == 429
        assert error.details == "slow down"


class TestResponseStructureError:
    """ResponseStructureError のテスト"""

    def test_payload(self):
        error = ResponseStructureError("bad", payload={"choices": []})
        assert error.payload == {"choices": []}
        assert "bad" in str(error)


class TestStreamParseError:
    """StreamParseError のテスト"""

    def test_message(self):
        error = StreamParseError("{oops", "Expecting property name")
        assert "{oops" in str(error)
        assert error.reason == "Expecting property name"
