"""Anthropic messages request translation.

Purpose:
- Build the JSON body for ``POST /messages`` from canonical inputs. Pure and
  deterministic: the same inputs always produce the same dictionary (and the
  same ``json.dumps`` output), with no I/O.

Shape::

    {"model": ..., "max_tokens": ..., "messages": [...],
     "system": ..., "temperature": ..., "tools": [...], "stream": true}

``system``, ``temperature``, ``tools`` and ``stream`` are only present when
they apply.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ...config.defaults import DEFAULT_MAX_TOKENS
from ..models import ContentBlock, Message, ModelConfig, TextContent, Tool, ToolRequest, ToolResponse

_ROLES = ("user", "assistant")


def encode_block(block: ContentBlock) -> Dict[str, Any]:
    """Encode one content block as a typed vendor content item."""
    if isinstance(block, TextContent):
        return {"type": "text", "text": block.text}
    if isinstance(block, ToolRequest):
        return {"type": "tool_use", "id": block.id, "name": block.name, "input": dict(block.arguments)}
    if isinstance(block, ToolResponse):
        item: Dict[str, Any] = {"type": "tool_result", "tool_use_id": block.tool_use_id, "content": block.content}
        if block.is_error:
            item["is_error"] = True
        return item
    raise TypeError(f"unsupported content block: {type(block).__name__}")


def encode_message(message: Message, *, with_tools: bool = True) -> Dict[str, Any]:
    """Encode one message.

    Text-only messages become ``{"role", "content": "<concatenated text>"}``.
    Messages carrying tool blocks become a typed item list in original order
    when ``with_tools`` is set; otherwise only their text is kept.

    Raises:
        ValueError: role outside ``user``/``assistant``.
    """
    if message.role not in _ROLES:
        raise ValueError(f"unsupported message role: {message.role!r}")
    if with_tools and message.has_tool_content():
        return {"role": message.role, "content": [encode_block(b) for b in message.content]}
    return {"role": message.role, "content": message.as_concat_text()}


def encode_tool(tool: Tool) -> Dict[str, Any]:
    return {"name": tool.name, "description": tool.description, "input_schema": dict(tool.input_schema)}


def build_payload(
    model_config: ModelConfig,
    system: Optional[str],
    messages: Sequence[Message],
    tools: Sequence[Tool] = (),
    *,
    stream: bool = False,
    with_tools: bool = True,
) -> Dict[str, Any]:
    """Assemble the request body.

    Parameters:
        model_config: Model id and generation limits.
        system: System prompt; omitted when empty or whitespace only.
        messages: Ordered conversation.
        tools: Tool declarations; forwarded only when ``with_tools``.
        stream: Add ``"stream": true`` for the streaming endpoint.
        with_tools: Whether tool declarations and tool blocks are encoded.

    Returns:
        Dict[str, Any]: JSON-serializable body.
    """
    encoded: List[Dict[str, Any]] = [encode_message(m, with_tools=with_tools) for m in messages]
    payload: Dict[str, Any] = {
        "model": model_config.model_name,
        "max_tokens": model_config.max_tokens or DEFAULT_MAX_TOKENS,
        "messages": encoded,
    }
    if system and system.strip():
        payload["system"] = system
    if model_config.temperature is not None:
        payload["temperature"] = model_config.temperature
    if with_tools and tools:
        payload["tools"] = [encode_tool(t) for t in tools]
    if stream:
        payload["stream"] = True
    return payload


__all__ = ["build_payload", "encode_block", "encode_message", "encode_tool"]
