"""Frame parsing for line-framed event streams.

Purpose:
- Turn raw body chunks into typed :class:`StreamEvent` values, in arrival
  order, without buffering beyond one incomplete line.

Frame rules:
- Blank lines, ``:`` comments and ``event:`` lines carry no payload and are
  skipped (the ``type`` field inside the JSON is authoritative).
- A ``data:`` prefix is stripped; ``[DONE]`` sentinels are ignored.
- The remainder must be a JSON object with a string ``type``; anything else
  raises ``ProviderError(code=STREAM_DECODE)`` with the 1-based line number.
"""
from __future__ import annotations

import json
from typing import Iterable, Iterator, Optional, Tuple

from ..errors import ErrorCode, ProviderError
from .line_framer import LineFramer
from .stream_event import StreamEvent, StreamEventKind

DONE_SENTINEL = "[DONE]"


def iter_lines(chunks: Iterable[bytes]) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs from a chunked byte body."""
    framer = LineFramer()
    position = 0
    for chunk in chunks:
        if not chunk:
            continue
        for line in framer.feed(chunk):
            position += 1
            yield position, line
    for line in framer.flush():
        position += 1
        yield position, line


def _decode_error(message: str, line: str, position: int, *, provider: str, model: Optional[str]) -> ProviderError:
    return ProviderError(
        code=ErrorCode.STREAM_DECODE,
        message=message,
        provider=provider,
        model=model,
        body=line,
        position=position,
    )


def parse_frame(line: str, position: int, *, provider: str, model: Optional[str] = None) -> Optional[StreamEvent]:
    """Parse one line into a :class:`StreamEvent` or ``None`` for non-data lines.

    Raises:
        ProviderError: ``STREAM_DECODE`` when the payload is not a JSON object
            carrying a string ``type``.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(":") or stripped.startswith("event:"):
        return None
    if stripped.startswith("data:"):
        stripped = stripped[len("data:"):].strip()
        if not stripped:
            return None
    if stripped == DONE_SENTINEL:
        return None
    try:
        obj = json.loads(stripped)
    except json.JSONDecodeError as e:
        raise _decode_error(f"malformed stream frame: {e.msg}", line, position, provider=provider, model=model) from e
    if not isinstance(obj, dict):
        raise _decode_error("stream frame is not a JSON object", line, position, provider=provider, model=model)
    frame_type = obj.get("type")
    if not isinstance(frame_type, str):
        raise _decode_error("stream frame has no type", line, position, provider=provider, model=model)
    index = obj.get("index")
    return StreamEvent(
        kind=StreamEventKind.from_type(frame_type),
        index=index if isinstance(index, int) and not isinstance(index, bool) else None,
        data=obj,
        position=position,
    )


def iter_events(chunks: Iterable[bytes], *, provider: str, model: Optional[str] = None) -> Iterator[StreamEvent]:
    """Yield typed events from a chunked body, skipping non-data lines."""
    for position, line in iter_lines(chunks):
        event = parse_frame(line, position, provider=provider, model=model)
        if event is not None:
            yield event


__all__ = ["DONE_SENTINEL", "iter_events", "iter_lines", "parse_frame"]
