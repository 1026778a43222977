"""
エンドポイント URL の正規化

ユーザーが入力した API ベース URL を chat completions の完全な URL に変換する。
"""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from .exceptions import ConfigurationError

CHAT_COMPLETIONS_PATH = "/chat/completions"


def normalize_endpoint(request_path: str) -> str:
    """
    API エンドポイントを正規化

    スキームが無ければ ``https://`` を付与し、パスが ``/chat/completions`` で
    終わっていなければ追加する。クエリとフラグメントは保持する。冪等。

    Args:
        request_path: 設定された URL（例: "api.openai.com/v1"）

    Returns:
        正規化済み URL（例: "https://api.openai.com/v1/chat/completions"）

    Raises:
        ConfigurationError: 空文字列、またはホスト名を含まない URL の場合

    Examples:
        >>> normalize_endpoint("api.openai.com/v1")
        'https://api.openai.com/v1/chat/completions'
        >>> normalize_endpoint("http://localhost:8080/v1/")
        'http://localhost:8080/v1/chat/completions'
    """
    raw = (request_path or "").strip()
    if not raw:
        raise ConfigurationError(
            "Request Path (API Endpoint URL) is missing. Please configure it."
        )

    if not raw.startswith(("http://", "https://")):
        raw = f"https://{raw}"

    try:
        parts = urlsplit(raw)
        # ポート番号の検証（不正なら ValueError）
        parts.port
    except ValueError as e:
        raise ConfigurationError(f"Invalid Request Path '{request_path}': {e}") from e

    if not parts.hostname:
        raise ConfigurationError(
            f"Invalid Request Path '{request_path}': no host name"
        )

    path = parts.path
    if not path.endswith(CHAT_COMPLETIONS_PATH):
        if not path.endswith("/"):
            path += "/"
        path += CHAT_COMPLETIONS_PATH.lstrip("/")

    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))
