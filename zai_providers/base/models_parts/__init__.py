"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`zai_providers.base.models_parts` if needed, while `zai_providers.base.models`
remains the primary stable import path.
"""

from .text_content import TextContent
from .tool_request import ToolRequest
from .tool_response import ToolResponse
from .message import ContentBlock, Message, Role
from .usage import Usage
from .provider_usage import ProviderUsage
from .model_config import ModelConfig
from .tool import Tool
from .config_key import ConfigKey
from .model_info import ModelInfo
from .provider_metadata import ProviderMetadata

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
