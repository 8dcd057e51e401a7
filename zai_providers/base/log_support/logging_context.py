"""Correlation fields shared by every event of one provider call."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Provider, model, request id and call mode; ``extra`` is flattened in."""

    provider: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    mode: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return the set fields only; ``extra`` never shadows a named field."""
        out = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        for key, value in (self.extra or {}).items():
            out.setdefault(key, value)
        return {k: v for k, v in out.items() if v is not None}


__all__ = ["LogContext"]
