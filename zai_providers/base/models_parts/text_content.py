"""
Plain text content block.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class TextContent:
    """A run of assistant or user text."""

    text: str

    @property
    def type(self) -> str:
        return "text"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the block."""
        return {"type": self.type, "text": self.text}


__all__ = ["TextContent"]
