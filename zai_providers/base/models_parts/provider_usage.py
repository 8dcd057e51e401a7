"""
Usage tagged with the model that produced it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .usage import Usage


@dataclass(frozen=True)
class ProviderUsage:
    """Usage for one call together with the resolved model name."""

    model: str
    usage: Usage

    def to_dict(self) -> Dict[str, Any]:
        return {"model": self.model, "usage": self.usage.to_dict()}


__all__ = ["ProviderUsage"]
