"""SupportsStreaming Protocol (single-class module).

Capability marker for providers that can stream message snapshots.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from ..models import Message, Tool
from ..streaming import MessageStream


@runtime_checkable
class SupportsStreaming(Protocol):
    """Capability marker for providers that can stream incremental snapshots.

    ``supports_streaming()`` returning False means callers must use batch
    mode; adapters do not fall back on their own.
    """

    def supports_streaming(self) -> bool:  # pragma: no cover - trivial
        """Return True if the provider can stream responses."""
        return True

    def complete_streaming(
        self,
        system: Optional[str],
        messages: Sequence[Message],
        tools: Sequence[Tool] = (),
    ) -> MessageStream:  # pragma: no cover - interface
        """Stream the response as growing ``(Message, Usage | None)`` snapshots."""
        ...
