"""
翻訳エラーの例外クラス階層

翻訳処理で発生する各種エラーを分類するための例外クラスを定義。
StreamParseError 以外は全て呼び出し元へ送出される。
"""

from __future__ import annotations

from typing import Any, Optional


class TranslationError(Exception):
    """翻訳エラーの基底クラス"""

    pass


class ConfigurationError(TranslationError):
    """設定エラー（API キー・エンドポイント未設定など）。リクエスト送信前に送出される"""

    pass


class TranslationNetworkError(TranslationError):
    """ネットワーク関連エラー（接続失敗、タイムアウト）"""

    pass


class APIError(TranslationError):
    """API が 2xx 以外のステータスを返した"""

    def __init__(self, status_code: int, details: str):
        self.status_code = status_code
        self.details = details
        super().__init__(
            f"API Request Failed\nStatus: {status_code}\nDetails: {details}"
        )


class ResponseStructureError(TranslationError):
    """レスポンスは受信できたが期待するフィールドが無い"""

    def __init__(self, message: str, payload: Optional[Any] = None):
        self.payload = payload
        super().__init__(message)


class StreamParseError(Exception):
    """
    SSE の data 行 1 行分のパース失敗

    ストリーム処理内でログ出力後に破棄される。呼び出し元には伝播しない。
    """

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed stream data ({reason}): {line!r}")
