"""
SSE ストリームのデコード

OpenAI 互換の ``data: {...}`` 行を逐次解析し、delta の content を連結する。
状態（StreamState）は呼び出し側が所有し、各関数に明示的に渡す。
更新コールバックは関数として注入する。

[DONE] の扱いは 2 通り:

- DoneBehavior.STOP: ストリーム全体の読み取りを終了する
- DoneBehavior.CHUNK: 現在のチャンクの残りの行だけを打ち切る
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import AsyncIterable, Callable, Iterable, Optional

from .exceptions import StreamParseError
from .payload import parse_stream_delta

logger = logging.getLogger(__name__)

DATA_PREFIX = "data:"
DONE_TOKEN = "[DONE]"

UpdateCallback = Callable[[str], None]
TextTransform = Callable[[str], str]


class DoneBehavior(str, enum.Enum):
    STOP = "stop"
    CHUNK = "chunk"


@dataclass
class StreamState:
    """1 回のストリーム読み取り中に保持する状態"""

    content: str = ""  # 連結済みの生テキスト（タグ除去前）
    carry: str = ""  # 改行で終わっていない未処理の断片
    done: bool = False  # True なら読み取りループを終了する
    deltas: int = 0  # 受信した delta の数


def iter_data_lines(lines: Iterable[str]) -> Iterable[str]:
    """``data:`` で始まる行だけを取り出し、プレフィックスを除去して返す"""
    for line in lines:
        stripped = line.strip()
        if stripped.startswith(DATA_PREFIX):
            yield stripped[len(DATA_PREFIX):].strip()


def feed_chunk(
    state: StreamState,
    chunk: str,
    on_delta: Optional[UpdateCallback] = None,
    done_behavior: DoneBehavior = DoneBehavior.STOP,
) -> None:
    """
    デコード済みテキストチャンクを 1 つ処理して state を更新

    Args:
        state: ストリーム状態（この関数が更新する）
        chunk: 受信したテキスト
        on_delta: delta 受信ごとに呼ばれる（引数は delta 自体）
        done_behavior: [DONE] 受信時の動作
    """
    if state.done:
        return

    lines = (state.carry + chunk).split("\n")
    state.carry = lines.pop()

    for data in iter_data_lines(lines):
        if data == DONE_TOKEN:
            if done_behavior is DoneBehavior.STOP:
                state.done = True
            break

        try:
            delta = parse_stream_delta(data)
        except StreamParseError as e:
            logger.warning("Error parsing stream data JSON: %s", e)
            continue

        if not delta:
            continue
        state.content += delta
        state.deltas += 1
        if on_delta is not None:
            on_delta(delta)


class StreamConsumer:
    """
    チャンク列を消費して最終テキストを返す

    delta ごとに ``transform(蓄積テキスト) + progress_suffix`` を
    ``on_update`` に通知し、終了時に接尾辞なしの最終テキストを通知する。
    """

    def __init__(
        self,
        on_update: Optional[UpdateCallback] = None,
        transform: TextTransform = str.strip,
        done_behavior: DoneBehavior = DoneBehavior.STOP,
        progress_suffix: str = "...",
    ):
        self.on_update = on_update
        self.transform = transform
        self.done_behavior = DoneBehavior(done_behavior)
        self.progress_suffix = progress_suffix

    def _push_progress(self, state: StreamState) -> None:
        if self.on_update is not None:
            self.on_update(self.transform(state.content) + self.progress_suffix)

    def feed(self, state: StreamState, chunk: str) -> None:
        feed_chunk(
            state,
            chunk,
            on_delta=lambda _delta: self._push_progress(state),
            done_behavior=self.done_behavior,
        )

    def finish(self, state: StreamState) -> str:
        if state.carry.strip():
            logger.debug("Discarding unterminated stream line: %r", state.carry)
        state.carry = ""
        final = self.transform(state.content)
        logger.debug("Stream finished: %d deltas, %d chars", state.deltas, len(final))
        if self.on_update is not None:
            self.on_update(final)
        return final

    def consume(self, chunks: Iterable[str], state: Optional[StreamState] = None) -> str:
        state = state if state is not None else StreamState()
        for chunk in chunks:
            self.feed(state, chunk)
            if state.done:
                break
        return self.finish(state)

    async def aconsume(
        self, chunks: AsyncIterable[str], state: Optional[StreamState] = None
    ) -> str:
        state = state if state is not None else StreamState()
        async for chunk in chunks:
            self.feed(state, chunk)
            if state.done:
                break
        return self.finish(state)


def consume_stream(
    chunks: Iterable[str],
    on_update: Optional[UpdateCallback] = None,
    transform: TextTransform = str.strip,
    done_behavior: DoneBehavior = DoneBehavior.STOP,
    progress_suffix: str = "...",
) -> str:
    """
    同期イテレータ版のショートカット

    Examples:
        >>> consume_stream(['data: {"choices":[{"delta":{"content":"Hi"}}]}\\n'])
        'Hi'
    """
    consumer = StreamConsumer(on_update, transform, done_behavior, progress_suffix)
    return consumer.consume(chunks)
