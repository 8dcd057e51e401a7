"""Anthropic messages stream decoding.

`StreamAccumulator` folds typed stream events into the growing assistant
message. :func:`decode_stream` drives it over a chunked body and yields a
frozen ``(Message, Usage | None)`` snapshot:

* after every event that changed the message (``message_start`` resets it,
  text deltas extend it, a finished tool block appends to it), and
* once more at ``message_stop``, carrying the final usage.

Usage-only events (``message_delta``), ``ping`` and unknown frames never
produce a snapshot. A body that ends before ``message_stop`` raises
``ProviderError(code=INCOMPLETE_STREAM)``; nothing after ``message_stop`` is
read.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ..errors import ErrorCode, ProviderError, code_for_vendor_error
from ..models import ContentBlock, Message, TextContent, ToolRequest, Usage
from ..streaming import StreamEvent, StreamEventKind, iter_events
from .anthropic_response import parse_usage


@dataclass
class _ToolDraft:
    id: str
    name: str
    partial_json: List[str] = field(default_factory=list)


class StreamAccumulator:
    """Mutable per-stream state; owned by exactly one streaming call."""

    def __init__(self, *, provider: str, model: Optional[str] = None) -> None:
        self.provider = provider
        self.model = model
        self.message_id: Optional[str] = None
        self.usage: Optional[Usage] = None
        self.stopped = False
        self._blocks: Dict[int, ContentBlock] = {}
        self._drafts: Dict[int, _ToolDraft] = {}

    # Snapshot -------------------------------------------------------------
    def snapshot(self) -> Message:
        content: Tuple[ContentBlock, ...] = tuple(self._blocks[i] for i in sorted(self._blocks))
        return Message(role="assistant", content=content, id=self.message_id)

    # Event handling -------------------------------------------------------
    def apply(self, event: StreamEvent) -> bool:
        """Fold ``event`` into the state; return True when content changed."""
        handler = _HANDLERS.get(event.kind)
        if handler is None:
            return False
        return handler(self, event)

    def _error(self, message: str, event: StreamEvent, code: ErrorCode = ErrorCode.STREAM_DECODE) -> ProviderError:
        return ProviderError(
            code=code,
            message=message,
            provider=self.provider,
            model=self.model,
            body=json.dumps(event.data, ensure_ascii=False),
            position=event.position,
        )

    def _merge_usage(self, raw: Any, event: StreamEvent) -> None:
        try:
            incoming = parse_usage(raw, provider=self.provider, model=self.model)
        except ProviderError as e:
            raise self._error(e.message, event) from e
        self.usage = incoming if self.usage is None else self.usage.merge(incoming)

    def _check_append(self, index: int, event: StreamEvent) -> None:
        # Snapshots list blocks by index; a new block below an already
        # published one would reorder content seen by the consumer.
        if index not in self._blocks and any(k > index for k in self._blocks):
            raise self._error(f"content block {index} arrived after a later block", event)

    def _on_message_start(self, event: StreamEvent) -> bool:
        message = event.data.get("message") or {}
        if not isinstance(message, dict):
            raise self._error("message_start.message is not an object", event)
        message_id = message.get("id")
        self.message_id = message_id if isinstance(message_id, str) else None
        self._blocks.clear()
        self._drafts.clear()
        if message.get("usage") is not None:
            self._merge_usage(message.get("usage"), event)
        return True

    def _on_block_start(self, event: StreamEvent) -> bool:
        block = event.data.get("content_block") or {}
        index = event.index if event.index is not None else len(self._blocks)
        if not isinstance(block, dict):
            raise self._error("content_block is not an object", event)
        if block.get("type") == "tool_use":
            tool_id, name = block.get("id"), block.get("name")
            if not isinstance(tool_id, str) or not isinstance(name, str):
                raise self._error("tool_use block needs string id and name", event)
            self._drafts[index] = _ToolDraft(id=tool_id, name=name)
            return False
        if block.get("type") == "text":
            text = block.get("text") or ""
            if not isinstance(text, str):
                raise self._error("content text is not a string", event)
            self._check_append(index, event)
            self._blocks[index] = TextContent(text)
            return bool(text)
        return False

    def _on_block_delta(self, event: StreamEvent) -> bool:
        delta = event.data.get("delta") or {}
        if not isinstance(delta, dict):
            raise self._error("delta is not an object", event)
        index = event.index if event.index is not None else 0
        delta_type = delta.get("type")
        if delta_type == "text_delta" or (delta_type is None and "text" in delta):
            text = delta.get("text", "")
            if not isinstance(text, str):
                raise self._error("delta text is not a string", event)
            self._check_append(index, event)
            current = self._blocks.get(index)
            prefix = current.text if isinstance(current, TextContent) else ""
            self._blocks[index] = TextContent(prefix + text)
            return bool(text)
        if delta_type == "input_json_delta":
            draft = self._drafts.get(index)
            if draft is None:
                raise self._error("input_json_delta without an open tool_use block", event)
            partial = delta.get("partial_json", "")
            if not isinstance(partial, str):
                raise self._error("partial_json is not a string", event)
            draft.partial_json.append(partial)
        return False

    def _on_block_stop(self, event: StreamEvent) -> bool:
        index = event.index if event.index is not None else 0
        draft = self._drafts.pop(index, None)
        if draft is None:
            return False
        raw = "".join(draft.partial_json).strip()
        try:
            arguments = json.loads(raw) if raw else {}
        except json.JSONDecodeError as e:
            raise self._error(f"tool input is not valid JSON: {e.msg}", event) from e
        if not isinstance(arguments, dict):
            raise self._error("tool input is not an object", event)
        self._check_append(index, event)
        self._blocks[index] = ToolRequest(id=draft.id, name=draft.name, arguments=arguments)
        return True

    def _on_message_delta(self, event: StreamEvent) -> bool:
        if event.data.get("usage") is not None:
            self._merge_usage(event.data.get("usage"), event)
        return False

    def _on_message_stop(self, event: StreamEvent) -> bool:
        self.stopped = True
        return False

    def _on_error(self, event: StreamEvent) -> bool:
        error = event.data.get("error") or {}
        error_type = error.get("type") if isinstance(error, dict) else None
        message = error.get("message") if isinstance(error, dict) else None
        raise self._error(
            str(message or error_type or "stream error event"),
            event,
            code=code_for_vendor_error(error_type if isinstance(error_type, str) else None),
        )


_HANDLERS = {
    StreamEventKind.MESSAGE_START: StreamAccumulator._on_message_start,
    StreamEventKind.CONTENT_BLOCK_START: StreamAccumulator._on_block_start,
    StreamEventKind.CONTENT_BLOCK_DELTA: StreamAccumulator._on_block_delta,
    StreamEventKind.CONTENT_BLOCK_STOP: StreamAccumulator._on_block_stop,
    StreamEventKind.MESSAGE_DELTA: StreamAccumulator._on_message_delta,
    StreamEventKind.MESSAGE_STOP: StreamAccumulator._on_message_stop,
    StreamEventKind.ERROR: StreamAccumulator._on_error,
}


def decode_events(
    events: Iterable[StreamEvent], *, provider: str, model: Optional[str] = None
) -> Iterator[Tuple[Message, Optional[Usage]]]:
    """Yield snapshots from already parsed events."""
    acc = StreamAccumulator(provider=provider, model=model)
    for event in events:
        changed = acc.apply(event)
        if acc.stopped:
            yield acc.snapshot(), acc.usage
            return
        if changed:
            yield acc.snapshot(), acc.usage
    raise ProviderError(
        code=ErrorCode.INCOMPLETE_STREAM,
        message="stream ended before message_stop",
        provider=provider,
        model=model,
    )


def decode_stream(
    chunks: Iterable[bytes], *, provider: str, model: Optional[str] = None
) -> Iterator[Tuple[Message, Optional[Usage]]]:
    """Yield snapshots from a chunked, line-framed response body."""
    yield from decode_events(iter_events(chunks, provider=provider, model=model), provider=provider, model=model)


__all__ = ["StreamAccumulator", "decode_events", "decode_stream"]
