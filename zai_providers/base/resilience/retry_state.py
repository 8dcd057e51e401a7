"""Per-call retry bookkeeping.

One `RetryState` is created for each logical call and lives only for its
duration; it is never shared between concurrent calls.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional

from ..errors import ProviderError


@dataclass
class RetryState:
    """Attempt counter, elapsed-time tracker and last error of one logical call."""

    attempt: int = 0
    started_at: float = field(default_factory=time.monotonic)
    last_error: Optional[ProviderError] = None

    @property
    def elapsed(self) -> float:
        """Seconds since the first attempt started."""
        return time.monotonic() - self.started_at

    def record_failure(self, error: ProviderError) -> None:
        self.last_error = error


__all__ = ["RetryState"]
