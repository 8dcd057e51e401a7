"""
Per-call model selection.

`ModelConfig` is immutable and supplied by the caller; adapters never change
it in place. ``with_fast`` and ``fast`` return copies.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class ModelConfig:
    """Model identifier plus the generation limits sent with every request.

    Attributes:
        model_name: Vendor model identifier.
        fast_model: Optional cheaper/faster alias used by ``complete_fast``.
        context_limit: Context window size in tokens, when known.
        max_tokens: Output token cap; the codec default applies when ``None``.
        temperature: Sampling temperature; omitted from requests when ``None``.
    """

    model_name: str
    fast_model: Optional[str] = None
    context_limit: Optional[int] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None

    def with_fast(self, fast_model: str) -> "ModelConfig":
        """Return a copy with ``fast_model`` set unless the caller already chose one."""
        if self.fast_model:
            return self
        return replace(self, fast_model=fast_model)

    def fast(self) -> "ModelConfig":
        """Return the configuration targeting the fast model (or ``self``)."""
        if not self.fast_model or self.fast_model == self.model_name:
            return self
        return replace(self, model_name=self.fast_model)


__all__ = ["ModelConfig"]
