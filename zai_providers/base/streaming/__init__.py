"""Streaming primitives: line framing, frame parsing and the snapshot iterator."""

from .line_framer import LineFramer
from .message_stream import MessageStream, Snapshot, StreamState
from .stream_decoder import DONE_SENTINEL, iter_events, iter_lines, parse_frame
from .stream_event import StreamEvent, StreamEventKind

__all__ = [
    "DONE_SENTINEL",
    "LineFramer",
    "MessageStream",
    "Snapshot",
    "StreamEvent",
    "StreamEventKind",
    "StreamState",
    "iter_events",
    "iter_lines",
    "parse_frame",
]
