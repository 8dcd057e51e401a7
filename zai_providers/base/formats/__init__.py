"""Request/response format codecs."""

from .codec import AnthropicMessagesCodec, MessagesCodec
from .plain_json import PlainJsonCodec

__all__ = ["AnthropicMessagesCodec", "MessagesCodec", "PlainJsonCodec"]
