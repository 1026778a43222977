"""
chat completions レスポンスの解析

レスポンスはここで一度だけ検証し、以下のいずれかのタグ付き結果に変換する。

- CompletionContent: ``choices[0].message.content`` が取得できた
- ErrorPayload: API がエラーボディを返した
- MalformedPayload: 期待する構造ではない
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Union

from .exceptions import ResponseStructureError, StreamParseError


@dataclass(frozen=True)
class CompletionContent:
    content: str


@dataclass(frozen=True)
class ErrorPayload:
    details: str
    body: Any = None


@dataclass(frozen=True)
class MalformedPayload:
    raw: Any


CompletionPayload = Union[CompletionContent, ErrorPayload, MalformedPayload]


def _first_choice(data: Any) -> Optional[dict]:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    return first if isinstance(first, dict) else None


def parse_completion(data: Any) -> CompletionPayload:
    """
    非ストリーミングの成功レスポンス（JSON デコード済み）を解析

    content が空文字列の場合も MalformedPayload として扱う。
    """
    choice = _first_choice(data)
    message = choice.get("message") if choice else None
    content = message.get("content") if isinstance(message, dict) else None
    if isinstance(content, str) and content:
        return CompletionContent(content=content)
    if isinstance(data, dict) and "error" in data:
        return ErrorPayload(details=format_details(data), body=data)
    return MalformedPayload(raw=data)


def parse_error_body(raw_text: str) -> ErrorPayload:
    """
    エラーレスポンスのボディを解析

    JSON として解釈できれば整形した JSON を、できなければ生テキストを
    details とする。
    """
    try:
        body = json.loads(raw_text)
    except ValueError:
        return ErrorPayload(details=raw_text, body=raw_text)
    return ErrorPayload(details=format_details(body), body=body)


def parse_stream_delta(data: str) -> Optional[str]:
    """
    SSE の data 行（``data:`` 除去済み）から delta の content を取り出す

    Returns:
        content 文字列。delta を含まないイベント（role のみ、finish_reason のみ
        など）の場合は None

    Raises:
        StreamParseError: JSON として解析できない、または JSON オブジェクトでない
    """
    try:
        parsed = json.loads(data)
    except ValueError as e:
        raise StreamParseError(data, str(e)) from e
    if not isinstance(parsed, dict):
        raise StreamParseError(data, f"expected object, got {type(parsed).__name__}")

    choice = _first_choice(parsed)
    delta = choice.get("delta") if choice else None
    content = delta.get("content") if isinstance(delta, dict) else None
    return content if isinstance(content, str) else None


def format_details(body: Any) -> str:
    return json.dumps(body, ensure_ascii=False, indent=2)


def require_content(payload: CompletionPayload) -> str:
    """CompletionContent 以外なら ResponseStructureError を送出"""
    if isinstance(payload, CompletionContent):
        return payload.content
    if isinstance(payload, ErrorPayload):
        raise ResponseStructureError(
            f"API Error: Invalid response structure received.\n{payload.details}",
            payload=payload.body,
        )
    raw = payload.raw
    raise ResponseStructureError(
        "API Error: Invalid response structure received.\n"
        f"{raw if isinstance(raw, str) else format_details(raw)}",
        payload=raw,
    )
