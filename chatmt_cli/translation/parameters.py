"""
リクエストパラメータの解析とリクエストボディの組み立て
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

# parameters の JSON が壊れている場合に使用
FALLBACK_PARAMETERS: Dict[str, Any] = {
    "temperature": 0.6,
    "top_p": 0.99,
    "frequency_penalty": 0,
    "presence_penalty": 0,
}

# 呼び出し側が必ず設定するキー
RESERVED_KEYS = ("model", "messages", "stream")


def parse_parameters(parameters: str) -> Dict[str, Any]:
    """
    parameters 設定値（JSON オブジェクト文字列）を解析

    解析に失敗した場合、または JSON オブジェクト以外の場合は警告を出して
    FALLBACK_PARAMETERS のコピーを返す。例外は送出しない。

    Examples:
        >>> parse_parameters('{"temperature": 0.1}')
        {'temperature': 0.1}
        >>> parse_parameters('not json')["top_p"]
        0.99
    """
    try:
        parsed = json.loads(parameters)
    except ValueError as e:
        logger.warning("Failed to parse parameters JSON, using default. Error: %s", e)
        return dict(FALLBACK_PARAMETERS)

    if not isinstance(parsed, dict):
        logger.warning(
            "Parameters JSON must be an object, got %s; using default.",
            type(parsed).__name__,
        )
        return dict(FALLBACK_PARAMETERS)
    return parsed


def build_request_body(
    model: str,
    messages: List[Dict[str, str]],
    parameters: Dict[str, Any],
    stream: bool,
) -> Dict[str, Any]:
    """
    chat completions のリクエストボディを生成

    model / messages / stream は parameters より優先される。
    """
    ignored = [key for key in RESERVED_KEYS if key in parameters]
    if ignored:
        logger.warning("Ignoring reserved keys in parameters: %s", ", ".join(ignored))

    body: Dict[str, Any] = {"model": model, "messages": messages}
    body.update((k, v) for k, v in parameters.items() if k not in RESERVED_KEYS)
    body["stream"] = stream
    return body
