"""
Provider capability advertisement.

Describes an adapter to an external registry: identity, known models with
their context windows, the default model, documentation and the
configuration keys the adapter reads. Nothing in the adapter itself consumes
this object.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .config_key import ConfigKey
from .model_info import ModelInfo


@dataclass(frozen=True)
class ProviderMetadata:
    """Identity and requirements of a provider adapter.

    Attributes:
        name: Stable registry key (e.g., ``"zai"``).
        display_name: Human-friendly name.
        description: One-line description for setup UIs.
        default_model: Model used when the caller does not pick one.
        known_models: Advertised models with context limits.
        doc_url: Vendor documentation URL.
        config_keys: Configuration options the adapter reads.
    """

    name: str
    display_name: str
    description: str
    default_model: str
    known_models: Tuple[ModelInfo, ...] = field(default_factory=tuple)
    doc_url: str = ""
    config_keys: Tuple[ConfigKey, ...] = field(default_factory=tuple)

    def config_key(self, name: str) -> Optional[ConfigKey]:
        return next((k for k in self.config_keys if k.name == name), None)

    def context_limit_for(self, model: str) -> Optional[int]:
        return next((m.context_limit for m in self.known_models if m.name == model), None)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the metadata fields."""
        return {
            "name": self.name,
            "display_name": self.display_name,
            "description": self.description,
            "default_model": self.default_model,
            "known_models": [m.to_dict() for m in self.known_models],
            "doc_url": self.doc_url,
            "config_keys": [k.to_dict() for k in self.config_keys],
        }


__all__ = ["ProviderMetadata"]
