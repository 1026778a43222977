"""
ホストから渡されるプラグイン設定の解釈

ホストの設定辞書（apiKey, requestPath, ...）をデフォルト値とマージし、
型検証を行ったうえで TranslatorSettings に変換する。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..config import ConfigValidator, get_default_config, merge_config
from .endpoint import normalize_endpoint
from .exceptions import ConfigurationError
from .stream import DoneBehavior

# 空文字列を「未設定」として扱い、デフォルト値に戻すキー
_FALLBACK_ON_EMPTY = (
    "model",
    "system_prompt",
    "user_prompt",
    "parameters",
    "removeTag",
)


def parse_bool(value: Any) -> bool:
    """"true" / True を真とみなす（大文字小文字は区別しない）"""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


@dataclass
class TranslatorSettings:
    """検証済みの翻訳設定"""

    api_key: str
    endpoint: str  # 正規化済み URL
    model: str
    system_prompt: str
    user_prompt: str
    parameters: str  # JSON 文字列（解析はリクエスト時）
    remove_tags: str
    use_stream: bool = False
    language_map: Dict[str, str] = field(default_factory=dict)
    done_behavior: DoneBehavior = DoneBehavior.STOP
    progress_suffix: str = "..."
    timeout: float = 30.0

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]]) -> "TranslatorSettings":
        """
        ホスト設定から TranslatorSettings を生成

        Args:
            config: ホストの設定辞書（None なら全てデフォルト）

        Returns:
            TranslatorSettings

        Raises:
            ConfigurationError: API キー・エンドポイントの未設定、型不一致、
                不正な URL の場合
        """
        config = dict(config or {})
        errors = ConfigValidator.validate(config)
        if errors:
            raise ConfigurationError(ConfigValidator.format_errors(errors))

        defaults = get_default_config()
        merged = merge_config(defaults, config)
        for key in _FALLBACK_ON_EMPTY:
            if not merged.get(key):
                merged[key] = defaults[key]

        api_key = str(merged.get("apiKey") or "").strip()
        if not api_key:
            raise ConfigurationError(
                "API Key is missing. Please configure it in the plugin settings."
            )

        try:
            timeout = float(merged["timeout"])
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid timeout: {merged['timeout']!r}") from e

        return cls(
            api_key=api_key,
            endpoint=normalize_endpoint(merged.get("requestPath") or ""),
            model=merged["model"],
            system_prompt=merged["system_prompt"],
            user_prompt=merged["user_prompt"],
            parameters=merged["parameters"],
            remove_tags=merged["removeTag"],
            use_stream=parse_bool(merged["use_stream"]),
            language_map=dict(merged["language"]),
            done_behavior=DoneBehavior(merged["done_behavior"]),
            progress_suffix=merged["progress_suffix"],
            timeout=timeout,
        )
