"""
OpenAI 互換 Chat Completions 実装

``<base>/chat/completions`` に 1 回だけ POST し、翻訳結果を取り出す。
use_stream が有効かつ更新コールバックが渡された場合は SSE で受信し、
途中経過をコールバックに通知する。
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from ..base import BaseTranslator, UpdateCallback
from ..exceptions import (
    APIError,
    ResponseStructureError,
    TranslationNetworkError,
)
from ..parameters import build_request_body, parse_parameters
from ..payload import MalformedPayload, parse_completion, parse_error_body, require_content
from ..prompts import build_messages
from ..result import TranslationResult
from ..settings import TranslatorSettings
from ..stream import StreamConsumer
from ..tags import TagStripper

logger = logging.getLogger(__name__)


class OpenAICompatTranslator(BaseTranslator):
    """
    OpenAI 互換 API（OpenAI, DeepSeek, Ollama, vLLM など）を使用した翻訳エンジン

    設定の検証はコンストラクタで行うため、API キーやエンドポイントが
    未設定ならネットワークアクセスの前に ConfigurationError が送出される。

    Examples:
        >>> translator = OpenAICompatTranslator(config={
        ...     "apiKey": "sk-...",
        ...     "requestPath": "api.openai.com/v1",
        ... })
        >>> result = translator.translate("こんにちは", "ja", "en")
        >>> print(result.text)
        "Hello"
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        settings: Optional[TranslatorSettings] = None,
        client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None,
        **kwargs,
    ):
        """
        OpenAICompatTranslator を初期化

        Args:
            config: ホストのプラグイン設定（apiKey, requestPath, ...）
            settings: 検証済み設定（指定時は config より優先）
            client: 同期リクエストに使う httpx.Client（省略時は内部で生成）
            async_client: translate_async で使う httpx.AsyncClient
            **kwargs: BaseTranslator に渡すパラメータ

        Raises:
            ConfigurationError: 設定が不正な場合
        """
        super().__init__(**kwargs)
        self.settings = settings if settings is not None else TranslatorSettings.from_config(config)
        self._tag_stripper = TagStripper(self.settings.remove_tags)
        self._client = client
        self._owns_client = client is None
        self._async_client = async_client

    # -------------------- public API --------------------

    def translate(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        detected_lang: Optional[str] = None,
        on_update: Optional[UpdateCallback] = None,
    ) -> TranslationResult:
        """
        テキストを翻訳

        Raises:
            TranslationNetworkError: 接続失敗、タイムアウト
            APIError: 2xx 以外のステータス
            ResponseStructureError: レスポンスに翻訳結果が含まれない
        """
        if not text or not text.strip():
            return self._result("", text, source_lang, target_lang, streamed=False)

        streaming = self._use_stream(on_update)
        body = self._build_body(text, source_lang, target_lang, detected_lang, streaming)
        client = self._get_client()

        try:
            if streaming:
                with client.stream(
                    "POST",
                    self.settings.endpoint,
                    json=body,
                    headers=self._headers(streaming),
                    timeout=None,
                ) as response:
                    if not response.is_success:
                        response.read()
                    self._check_stream_response(response)
                    translated = self._stream_consumer(on_update).consume(response.iter_text())
            else:
                response = client.post(
                    self.settings.endpoint,
                    json=body,
                    headers=self._headers(streaming),
                    timeout=self.settings.timeout,
                )
                translated = self._parse_buffered(response)
        except httpx.HTTPError as e:
            raise TranslationNetworkError(f"Network or Fetch Error: {e}") from e

        return self._result(translated, text, source_lang, target_lang, streaming)

    async def translate_async(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        detected_lang: Optional[str] = None,
        on_update: Optional[UpdateCallback] = None,
    ) -> TranslationResult:
        """
        非同期翻訳（httpx.AsyncClient を使用）

        ストリーミング時の待機は次のチャンク受信時のみ。チャンク間の処理は
        同期的に完了する。
        """
        if not text or not text.strip():
            return self._result("", text, source_lang, target_lang, streamed=False)

        streaming = self._use_stream(on_update)
        body = self._build_body(text, source_lang, target_lang, detected_lang, streaming)

        client = self._async_client
        owns_client = client is None
        if client is None:
            client = httpx.AsyncClient()

        try:
            if streaming:
                async with client.stream(
                    "POST",
                    self.settings.endpoint,
                    json=body,
                    headers=self._headers(streaming),
                    timeout=None,
                ) as response:
                    if not response.is_success:
                        await response.aread()
                    self._check_stream_response(response)
                    translated = await self._stream_consumer(on_update).aconsume(
                        response.aiter_text()
                    )
            else:
                response = await client.post(
                    self.settings.endpoint,
                    json=body,
                    headers=self._headers(streaming),
                    timeout=self.settings.timeout,
                )
                translated = self._parse_buffered(response)
        except httpx.HTTPError as e:
            raise TranslationNetworkError(f"Network or Fetch Error: {e}") from e
        finally:
            if owns_client:
                await client.aclose()

        return self._result(translated, text, source_lang, target_lang, streaming)

    def strip_tags(self, text: str) -> str:
        """設定されたマーカータグを除去し、前後の空白を取り除く"""
        return self._tag_stripper.strip(text)

    def get_translator_name(self) -> str:
        """翻訳エンジン名を取得"""
        return "openai_compat"

    def cleanup(self) -> None:
        """内部で生成した HTTP クライアントを閉じる"""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    # -------------------- internals --------------------

    def _use_stream(self, on_update: Optional[UpdateCallback]) -> bool:
        return self.settings.use_stream and on_update is not None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client()
        return self._client

    def _headers(self, streaming: bool) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.api_key}",
        }
        if streaming:
            headers["Accept"] = "text/event-stream"
        return headers

    def _build_body(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        detected_lang: Optional[str],
        streaming: bool,
    ) -> Dict[str, Any]:
        messages = build_messages(
            self.settings.system_prompt,
            self.settings.user_prompt,
            text,
            source_lang,
            target_lang,
            detected_lang=detected_lang,
            language_map=self.settings.language_map,
        )
        body = build_request_body(
            self.settings.model,
            messages,
            parse_parameters(self.settings.parameters),
            stream=streaming,
        )
        logger.debug(
            "Sending chat completion request to %s (model=%s, stream=%s)",
            self.settings.endpoint,
            self.settings.model,
            streaming,
        )
        return body

    def _stream_consumer(self, on_update: Optional[UpdateCallback]) -> StreamConsumer:
        return StreamConsumer(
            on_update=on_update,
            transform=self._tag_stripper.strip,
            done_behavior=self.settings.done_behavior,
            progress_suffix=self.settings.progress_suffix,
        )

    @staticmethod
    def _check_stream_response(response: httpx.Response) -> None:
        """ストリーミングレスポンスのステータスを確認（エラー時のボディは読み込み済みであること）"""
        if not response.is_success:
            raise api_error_from_response(response)
        if response.status_code == httpx.codes.NO_CONTENT:
            raise ResponseStructureError("Response body is null, cannot process stream.")

    def _parse_buffered(self, response: httpx.Response) -> str:
        if not response.is_success:
            raise api_error_from_response(response)
        try:
            payload = parse_completion(response.json())
        except ValueError:
            payload = MalformedPayload(raw=response.text)
        return self._tag_stripper.strip(require_content(payload).strip())

    def _result(
        self,
        translated: str,
        text: str,
        source_lang: str,
        target_lang: str,
        streamed: bool,
    ) -> TranslationResult:
        return TranslationResult(
            text=translated,
            original_text=text,
            source_lang=source_lang,
            target_lang=target_lang,
            model=self.settings.model,
            streamed=streamed,
        )


def api_error_from_response(response: httpx.Response) -> APIError:
    """読み込み済みのエラーレスポンスから APIError を生成"""
    error = parse_error_body(response.text)
    return APIError(response.status_code, error.details)
