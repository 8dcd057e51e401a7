"""Incremental line framing for chunked response bodies.

Network reads split the body at arbitrary byte offsets. `LineFramer` keeps
only the incomplete tail of the previous chunk and hands out whole lines as
soon as their terminator arrives; a UTF-8 sequence cut between two chunks is
held by an incremental decoder until it is complete.
"""
from __future__ import annotations

import codecs
from typing import List


class LineFramer:
    """Assemble complete text lines from partial byte chunks."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._buffer = ""

    def feed(self, chunk: bytes) -> List[str]:
        """Add ``chunk`` and return every line it completed (terminators removed)."""
        self._buffer += self._decoder.decode(chunk)
        return self._drain()

    def flush(self) -> List[str]:
        """Return the trailing unterminated line, if any, at end of input."""
        self._buffer += self._decoder.decode(b"", final=True)
        lines = self._drain()
        if self._buffer:
            lines.append(self._buffer.rstrip("\r"))
            self._buffer = ""
        return lines

    def _drain(self) -> List[str]:
        if "\n" not in self._buffer:
            return []
        *complete, self._buffer = self._buffer.split("\n")
        return [line[:-1] if line.endswith("\r") else line for line in complete]


__all__ = ["LineFramer"]
