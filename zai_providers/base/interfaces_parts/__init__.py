"""Single-class interface modules for the providers layer."""

from .llm_provider import LLMProvider
from .supports_streaming import SupportsStreaming

__all__ = ["LLMProvider", "SupportsStreaming"]
