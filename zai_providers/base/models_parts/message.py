"""
Message DTO shared across providers.

Defines the `Message` dataclass, the `Role` literal and the `ContentBlock`
union. Messages are frozen: streaming decoders build a new snapshot for every
change instead of mutating the previous one, so snapshots already handed to
a caller never change underneath it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from .text_content import TextContent
from .tool_request import ToolRequest
from .tool_response import ToolResponse


# Conversation roles understood by the vendor messages API.
Role = Literal["user", "assistant"]

ContentBlock = Union[TextContent, ToolRequest, ToolResponse]


@dataclass(frozen=True)
class Message:
    """A single conversation turn.

    Summary:
        Represents a normalized chat message as an ordered, append-only
        sequence of content blocks.

    Attributes:
        role: ``"user"`` or ``"assistant"``.
        content: Ordered content blocks (text, tool requests, tool results).
        id: Vendor message id when the message came from a response.

    Methods:
        user / assistant: Convenience constructors for single-text messages.
        with_content: Return a copy with one more block appended.
        as_concat_text: Concatenate all text blocks.
        tool_requests: Return the tool requests in order.
    """

    role: Role
    content: Tuple[ContentBlock, ...] = field(default_factory=tuple)
    id: Optional[str] = None

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(role="user", content=(TextContent(text),))

    @classmethod
    def assistant(cls, text: str = "") -> "Message":
        return cls(role="assistant", content=(TextContent(text),))

    def with_content(self, block: ContentBlock) -> "Message":
        """Return a new message with ``block`` appended after existing content."""
        return Message(role=self.role, content=self.content + (block,), id=self.id)

    def as_concat_text(self) -> str:
        """Return the concatenation of every text block, in order."""
        return "".join(b.text for b in self.content if isinstance(b, TextContent))

    def tool_requests(self) -> List[ToolRequest]:
        return [b for b in self.content if isinstance(b, ToolRequest)]

    def has_tool_content(self) -> bool:
        return any(isinstance(b, (ToolRequest, ToolResponse)) for b in self.content)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the message."""
        data: Dict[str, Any] = {"role": self.role, "content": [b.to_dict() for b in self.content]}
        if self.id is not None:
            data["id"] = self.id
        return data


__all__ = [
    "ContentBlock",
    "Message",
    "Role",
]
