"""
Tool invocation requested by the assistant.

Carries the vendor-assigned call id, the tool name and the decoded JSON
arguments. Argument dictionaries are treated as read-only once the block is
built; the block itself is frozen.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class ToolRequest:
    """An assistant ``tool_use`` content block.

    Attributes:
        id: Vendor-assigned identifier echoed back by the matching
            :class:`ToolResponse`.
        name: Declared tool name.
        arguments: Decoded JSON object passed as tool input.
    """

    id: str
    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> str:
        return "tool_use"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the block."""
        return {"type": self.type, "id": self.id, "name": self.name, "arguments": dict(self.arguments)}


__all__ = ["ToolRequest"]
