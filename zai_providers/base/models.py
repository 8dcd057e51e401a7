"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``zai_providers.base.models_parts``.
"""

from .models_parts.text_content import TextContent
from .models_parts.tool_request import ToolRequest
from .models_parts.tool_response import ToolResponse
from .models_parts.message import ContentBlock, Message, Role
from .models_parts.usage import Usage
from .models_parts.provider_usage import ProviderUsage
from .models_parts.model_config import ModelConfig
from .models_parts.tool import Tool
from .models_parts.config_key import ConfigKey
from .models_parts.model_info import ModelInfo
from .models_parts.provider_metadata import ProviderMetadata

__all__ = [
    "TextContent",
    "ToolRequest",
    "ToolResponse",
    "ContentBlock",
    "Message",
    "Role",
    "Usage",
    "ProviderUsage",
    "ModelConfig",
    "Tool",
    "ConfigKey",
    "ModelInfo",
    "ProviderMetadata",
]
