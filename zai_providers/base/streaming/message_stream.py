"""Pull iterator over streaming snapshots.

`MessageStream` wraps the snapshot generator of one streaming call. The
consumer pulls ``(Message, Usage | None)`` pairs; the stream ends in exactly
one terminal state:

* ``finished``: the vendor signalled end of message.
* ``failed``: an exception (normally a :class:`ProviderError`) was raised to
  the consumer.
* ``closed``: the consumer stopped early via :meth:`MessageStream.close` or a
  ``with`` block exit. This is not an error.

Leaving the stream in any terminal state releases the HTTP response, and so
does dropping an open stream.
"""
from __future__ import annotations

from contextlib import suppress
from enum import Enum
from typing import Callable, Iterator, Optional, Tuple

from ..errors import ProviderError
from ..models import Message, Usage

Snapshot = Tuple[Message, Optional[Usage]]


class StreamState(str, Enum):
    OPEN = "open"
    FINISHED = "finished"
    FAILED = "failed"
    CLOSED = "closed"


class MessageStream:
    """Explicit iterator over message snapshots of one streaming call."""

    def __init__(
        self,
        snapshots: Iterator[Snapshot],
        *,
        on_finish: Optional[Callable[[Optional[Snapshot], int], None]] = None,
        on_error: Optional[Callable[[ProviderError], None]] = None,
        on_close: Optional[Callable[[], None]] = None,
    ) -> None:
        self._snapshots = snapshots
        self._on_close = on_close
        self._on_finish = on_finish
        self._on_error = on_error
        self._state = StreamState.OPEN
        self._last: Optional[Snapshot] = None
        self._emitted = 0
        self.error: Optional[ProviderError] = None

    def __iter__(self) -> "MessageStream":
        return self

    def __next__(self) -> Snapshot:
        if self._state is not StreamState.OPEN:
            raise StopIteration
        try:
            item = next(self._snapshots)
        except StopIteration:
            self._terminate(StreamState.FINISHED)
            if self._on_finish is not None:
                with suppress(Exception):
                    self._on_finish(self._last, self._emitted)
            raise
        except ProviderError as e:
            self.error = e
            self._terminate(StreamState.FAILED)
            if self._on_error is not None:
                with suppress(Exception):
                    self._on_error(e)
            raise
        except Exception:
            self._terminate(StreamState.FAILED)
            raise
        self._last = item
        self._emitted += 1
        return item

    def close(self) -> None:
        """Stop consuming and release the response; no-op once terminal."""
        if self._state is StreamState.OPEN:
            self._terminate(StreamState.CLOSED)

    def collect(self) -> Snapshot:
        """Drain the stream and return the final snapshot.

        Raises whatever the stream raises; returns an empty assistant message
        when nothing was emitted.
        """
        for _ in self:
            pass
        return self._last or (Message.assistant(""), None)

    def _terminate(self, state: StreamState) -> None:
        self._state = state
        close = getattr(self._snapshots, "close", None)
        try:
            if callable(close):
                close()
        finally:
            if self._on_close is not None:
                self._on_close()

    def __del__(self) -> None:
        # A stream dropped while open, even before its first pull, still
        # releases the response.
        with suppress(Exception):
            self.close()

    def __enter__(self) -> "MessageStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def finished(self) -> bool:
        return self._state is StreamState.FINISHED

    @property
    def emitted(self) -> int:
        """Number of snapshots handed to the consumer so far."""
        return self._emitted

    @property
    def last(self) -> Optional[Snapshot]:
        return self._last


__all__ = ["MessageStream", "Snapshot", "StreamState"]
