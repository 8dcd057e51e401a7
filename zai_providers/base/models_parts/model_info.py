"""
ModelInfo DTO for advertised models.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ModelInfo:
    """A known model and its context window size (tokens)."""

    name: str
    context_limit: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ModelInfo"]
