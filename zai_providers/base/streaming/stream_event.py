"""
Typed stream frame.

Each non-empty data line of a vendor stream is parsed into one `StreamEvent`.
The ``kind`` discriminator mirrors the vendor ``type`` field; frames whose type
is not recognized are kept as ``UNKNOWN`` and skipped by the accumulator.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class StreamEventKind(str, Enum):
    MESSAGE_START = "message_start"
    CONTENT_BLOCK_START = "content_block_start"
    CONTENT_BLOCK_DELTA = "content_block_delta"
    CONTENT_BLOCK_STOP = "content_block_stop"
    MESSAGE_DELTA = "message_delta"
    MESSAGE_STOP = "message_stop"
    PING = "ping"
    ERROR = "error"
    UNKNOWN = "unknown"

    @classmethod
    def from_type(cls, value: str) -> "StreamEventKind":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class StreamEvent:
    """One decoded stream frame.

    Attributes:
        kind: Frame discriminator.
        index: Content block index for block-level frames.
        data: The full decoded JSON object.
        position: 1-based line number the frame was read from.
    """

    kind: StreamEventKind
    index: Optional[int] = None
    data: Dict[str, Any] = field(default_factory=dict)
    position: Optional[int] = None

    @property
    def vendor_type(self) -> str:
        return str(self.data.get("type", self.kind.value))


__all__ = ["StreamEvent", "StreamEventKind"]
