"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports the single-class modules under
``zai_providers.base.interfaces_parts`` to keep imports stable for upstream
code.
"""

from __future__ import annotations

from .interfaces_parts import LLMProvider, SupportsStreaming

__all__ = ["LLMProvider", "SupportsStreaming"]
