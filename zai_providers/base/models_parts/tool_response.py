"""
Result of a tool execution, sent back to the model in a user turn.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ToolResponse:
    """A user ``tool_result`` content block.

    Attributes:
        tool_use_id: Id of the :class:`ToolRequest` this answers.
        content: Textual tool output.
        is_error: Whether the tool reported a failure.
    """

    tool_use_id: str
    content: str
    is_error: bool = False

    @property
    def type(self) -> str:
        return "tool_result"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the block."""
        return {
            "type": self.type,
            "tool_use_id": self.tool_use_id,
            "content": self.content,
            "is_error": self.is_error,
        }


__all__ = ["ToolResponse"]
