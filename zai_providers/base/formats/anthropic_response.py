"""Anthropic messages response decoding (batch mode).

Reads the complete JSON body of a non-streaming call into a canonical
assistant :class:`Message` plus :class:`Usage`. Missing optional parts
(``content``, ``usage``, ``id``) degrade to empty values; values of the wrong
shape raise ``ProviderError(code=DECODE)``.
"""
from __future__ import annotations

import json
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..errors import ErrorCode, ProviderError
from ..models import ContentBlock, Message, TextContent, ToolRequest, Usage


def decode_error(message: str, *, provider: str, model: Optional[str], body: Optional[str] = None) -> ProviderError:
    return ProviderError(code=ErrorCode.DECODE, message=message, provider=provider, model=model, body=body)


def load_body(body: Union[str, bytes, Mapping[str, Any]], *, provider: str, model: Optional[str]) -> Mapping[str, Any]:
    """Parse ``body`` into a JSON object, raising ``DECODE`` otherwise."""
    if isinstance(body, Mapping):
        return body
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise decode_error(f"response is not valid JSON: {e.msg}", provider=provider, model=model, body=text) from e
    if not isinstance(obj, dict):
        raise decode_error("response is not a JSON object", provider=provider, model=model, body=text)
    return obj


def _token_count(raw: Mapping[str, Any], key: str, *, provider: str, model: Optional[str]) -> Optional[int]:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise decode_error(f"usage.{key} is not an integer", provider=provider, model=model)
    return value


def parse_usage(raw: Any, *, provider: str, model: Optional[str] = None) -> Usage:
    """Read ``input_tokens``/``output_tokens``; absent values stay ``None``."""
    if raw is None:
        return Usage()
    if not isinstance(raw, Mapping):
        raise decode_error("usage is not an object", provider=provider, model=model)
    return Usage(
        input_tokens=_token_count(raw, "input_tokens", provider=provider, model=model),
        output_tokens=_token_count(raw, "output_tokens", provider=provider, model=model),
    )


def _is_text_block(block: Mapping[str, Any]) -> bool:
    block_type = block.get("type")
    return block_type == "text" or (block_type is None and "text" in block)


def decode_text(block: Mapping[str, Any], *, provider: str, model: Optional[str]) -> TextContent:
    text = block.get("text", "")
    if not isinstance(text, str):
        raise decode_error("content text is not a string", provider=provider, model=model)
    return TextContent(text)


def decode_tool_use(block: Mapping[str, Any], *, provider: str, model: Optional[str]) -> ToolRequest:
    tool_id, name, arguments = block.get("id"), block.get("name"), block.get("input", {})
    if not isinstance(tool_id, str) or not isinstance(name, str):
        raise decode_error("tool_use block needs string id and name", provider=provider, model=model)
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise decode_error("tool_use input is not an object", provider=provider, model=model)
    return ToolRequest(id=tool_id, name=name, arguments=arguments)


def _content_list(obj: Mapping[str, Any], *, provider: str, model: Optional[str]) -> List[Any]:
    content = obj.get("content")
    if content is None:
        return []
    if not isinstance(content, list):
        raise decode_error("content is not a list", provider=provider, model=model)
    return content


def decode_batch(
    body: Union[str, bytes, Mapping[str, Any]],
    *,
    provider: str,
    model: Optional[str] = None,
    first_text_only: bool = False,
) -> Tuple[Message, Usage]:
    """Decode a complete response body.

    Parameters:
        body: Raw response text/bytes or an already parsed mapping.
        provider: Provider key for error context.
        model: Model name for error context.
        first_text_only: Keep only the first text block (plain JSON codec);
            otherwise every ``text`` and ``tool_use`` block is kept in order.

    Returns:
        Tuple[Message, Usage]: Assistant message (empty text when the vendor
        sent no content) and usage.
    """
    obj = load_body(body, provider=provider, model=model)
    blocks: List[ContentBlock] = []
    for block in _content_list(obj, provider=provider, model=model):
        if not isinstance(block, Mapping):
            raise decode_error("content block is not an object", provider=provider, model=model)
        if _is_text_block(block):
            blocks.append(decode_text(block, provider=provider, model=model))
            if first_text_only:
                break
        elif block.get("type") == "tool_use" and not first_text_only:
            blocks.append(decode_tool_use(block, provider=provider, model=model))
    if not blocks:
        blocks.append(TextContent(""))
    message_id = obj.get("id")
    message = Message(
        role="assistant",
        content=tuple(blocks),
        id=message_id if isinstance(message_id, str) else None,
    )
    return message, parse_usage(obj.get("usage"), provider=provider, model=model)


__all__ = [
    "decode_batch",
    "decode_error",
    "decode_text",
    "decode_tool_use",
    "load_body",
    "parse_usage",
]
