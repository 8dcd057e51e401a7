"""
Advertised configuration option.

Used by provider metadata to tell a registry or setup UI which settings an
adapter reads. Adapters never mutate these at runtime.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ConfigKey:
    """A single configuration option descriptor.

    Attributes:
        name: Key name, e.g. ``"ZAI_API_KEY"``.
        required: Whether construction fails without a value.
        secret: Whether the value is a credential (never logged).
        default: Fallback value used when the key is unset.
    """

    name: str
    required: bool
    secret: bool
    default: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ConfigKey"]
