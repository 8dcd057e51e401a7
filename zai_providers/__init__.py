"""zai_providers package

Provider adapters for messages-style LLM APIs (Z.ai and Anthropic).

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`
    - Models: :class:`Message`, :class:`Usage`, :class:`ModelConfig`, ...
    - Factory: :func:`create`, :class:`ProviderFactory`,
      :func:`list_provider_metadata`
"""

from .base.errors import ErrorCode, ProviderError
from .base.factory import ProviderFactory, UnknownProviderError, list_provider_metadata
from .base.models import (
    ConfigKey,
    Message,
    ModelConfig,
    ModelInfo,
    ProviderMetadata,
    ProviderUsage,
    TextContent,
    Tool,
    ToolRequest,
    ToolResponse,
    Usage,
)
from .base.streaming import MessageStream

__version__ = "0.1.0"


def create(provider: str, **kwargs):
    """Create a provider adapter by canonical name (``"zai"``, ``"anthropic"``)."""
    return ProviderFactory.create(provider, **kwargs)


__all__ = [
    "__version__",
    "ConfigKey",
    "ErrorCode",
    "Message",
    "MessageStream",
    "ModelConfig",
    "ModelInfo",
    "ProviderError",
    "ProviderFactory",
    "ProviderMetadata",
    "ProviderUsage",
    "TextContent",
    "Tool",
    "ToolRequest",
    "ToolResponse",
    "UnknownProviderError",
    "Usage",
    "create",
    "list_provider_metadata",
]
