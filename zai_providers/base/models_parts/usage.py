"""
Token usage accounting.

`Usage` keeps "not reported" (``None``) distinct from "reported as zero".
Streaming decoders fold successive partial reports with :meth:`Usage.merge`,
which never lets a counter go down within one stream.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


def _max_known(current: Optional[int], incoming: Optional[int]) -> Optional[int]:
    if incoming is None:
        return current
    if current is None:
        return incoming
    return max(current, incoming)


@dataclass(frozen=True)
class Usage:
    """Token counts for one completion.

    Attributes:
        input_tokens: Prompt-side tokens, if reported.
        output_tokens: Completion-side tokens, if reported.
        total_tokens: Explicit total; derived from the two components when
            absent and both are known.
    """

    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    def __post_init__(self) -> None:
        if self.total_tokens is None and self.input_tokens is not None and self.output_tokens is not None:
            object.__setattr__(self, "total_tokens", self.input_tokens + self.output_tokens)

    def merge(self, other: "Usage") -> "Usage":
        """Fold a later report into this one, keeping counters non-decreasing."""
        input_tokens = _max_known(self.input_tokens, other.input_tokens)
        output_tokens = _max_known(self.output_tokens, other.output_tokens)
        total = None
        if input_tokens is None or output_tokens is None:
            total = _max_known(self.total_tokens, other.total_tokens)
        return Usage(input_tokens=input_tokens, output_tokens=output_tokens, total_tokens=total)

    def is_empty(self) -> bool:
        return self.input_tokens is None and self.output_tokens is None and self.total_tokens is None

    def to_dict(self) -> Dict[str, Optional[int]]:
        """Return the canonical ``{"input", "output", "total"}`` mapping."""
        return {"input": self.input_tokens, "output": self.output_tokens, "total": self.total_tokens}


__all__ = ["Usage"]
