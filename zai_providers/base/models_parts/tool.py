"""
Tool declaration DTO.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Tool:
    """A tool the model may call.

    Attributes:
        name: Tool name referenced by ``ToolRequest.name``.
        description: Natural-language description shown to the model.
        input_schema: JSON Schema of the tool input object.
    """

    name: str
    description: str = ""
    input_schema: Dict[str, Any] = field(default_factory=lambda: {"type": "object", "properties": {}})


__all__ = ["Tool"]
