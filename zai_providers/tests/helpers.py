"""Shared helpers for provider tests: vendor stream encoding and tracked bodies."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Iterator, List

import httpx


def sse(*frames: Dict[str, Any]) -> bytes:
    """Encode frames the way the vendor streams them (``event:``/``data:`` pairs)."""
    out = []
    for frame in frames:
        out.append(f"event: {frame.get('type', 'unknown')}\ndata: {json.dumps(frame)}\n\n")
    return "".join(out).encode("utf-8")


def scenario_c_frames() -> List[Dict[str, Any]]:
    return [
        {"type": "message_start", "message": {"id": "msg_1", "role": "assistant", "usage": {"input_tokens": 10}}},
        {"type": "content_block_delta", "index": 0, "delta": {"type": "text_delta", "text": "O"}},
        {"type": "content_block_delta", "index": 0, "delta": {"type": "text_delta", "text": "K"}},
        {"type": "message_delta", "delta": {"stop_reason": "end_turn"}, "usage": {"output_tokens": 1}},
        {"type": "message_stop"},
    ]


def tool_use_frames() -> List[Dict[str, Any]]:
    return [
        {"type": "message_start", "message": {"id": "msg_t", "usage": {"input_tokens": 20, "output_tokens": 1}}},
        {"type": "content_block_start", "index": 0, "content_block": {"type": "text", "text": ""}},
        {"type": "content_block_delta", "index": 0, "delta": {"type": "text_delta", "text": "Checking."}},
        {"type": "content_block_stop", "index": 0},
        {
            "type": "content_block_start",
            "index": 1,
            "content_block": {"type": "tool_use", "id": "toolu_1", "name": "get_weather", "input": {}},
        },
        {"type": "content_block_delta", "index": 1, "delta": {"type": "input_json_delta", "partial_json": '{"city": "Par'}},
        {"type": "content_block_delta", "index": 1, "delta": {"type": "input_json_delta", "partial_json": 'is"}'}},
        {"type": "content_block_stop", "index": 1},
        {"type": "message_delta", "delta": {"stop_reason": "tool_use"}, "usage": {"output_tokens": 15}},
        {"type": "message_stop"},
    ]


def chunked(data: bytes, size: int) -> List[bytes]:
    return [data[i : i + size] for i in range(0, len(data), size)]


class TrackingStream(httpx.SyncByteStream):
    """Response body that records how far it was read and whether it was closed."""

    def __init__(self, chunks: Iterable[bytes]) -> None:
        self.chunks = list(chunks)
        self.read_chunks = 0
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        for chunk in self.chunks:
            self.read_chunks += 1
            yield chunk

    def close(self) -> None:
        self.closed = True


class FailingStream(TrackingStream):
    """Tracking body that raises ``error`` once its chunks are exhausted."""

    def __init__(self, chunks: Iterable[bytes], error: Exception) -> None:
        super().__init__(chunks)
        self.error = error

    def __iter__(self) -> Iterator[bytes]:
        yield from super().__iter__()
        raise self.error
