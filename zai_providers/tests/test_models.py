"""Unit tests for the canonical message model DTOs."""
from __future__ import annotations

import dataclasses

import pytest

from zai_providers.base.models import (
    Message,
    ModelConfig,
    ProviderUsage,
    TextContent,
    ToolRequest,
    ToolResponse,
    Usage,
)


def test_message_helpers_build_single_text_block():
    msg = Message.user("hi")
    assert msg.role == "user"  # nosec B101
    assert msg.content == (TextContent("hi"),)  # nosec B101
    assert Message.assistant().as_concat_text() == ""  # nosec B101


def test_with_content_appends_and_leaves_original_untouched():
    first = Message.assistant("a")
    second = first.with_content(ToolRequest(id="t1", name="lookup", arguments={"q": 1}))
    assert len(first.content) == 1  # nosec B101
    assert [b.type for b in second.content] == ["text", "tool_use"]  # nosec B101
    assert second.tool_requests()[0].name == "lookup"  # nosec B101
    assert second.has_tool_content()  # nosec B101


def test_message_is_frozen():
    msg = Message.user("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        msg.role = "assistant"  # type: ignore[misc]


def test_as_concat_text_skips_tool_blocks():
    msg = Message(
        role="user",
        content=(TextContent("a"), ToolResponse(tool_use_id="t1", content="42"), TextContent("b")),
    )
    assert msg.as_concat_text() == "ab"  # nosec B101


def test_message_to_dict_includes_id_only_when_set():
    assert "id" not in Message.user("x").to_dict()  # nosec B101
    data = Message(role="assistant", content=(TextContent("y"),), id="msg_1").to_dict()
    assert data == {"role": "assistant", "content": [{"type": "text", "text": "y"}], "id": "msg_1"}  # nosec B101


def test_usage_total_derived_only_when_both_known():
    assert Usage(5, 1).total_tokens == 6  # nosec B101
    assert Usage(5, None).total_tokens is None  # nosec B101
    assert Usage(None, None, 9).total_tokens == 9  # nosec B101
    assert Usage().is_empty()  # nosec B101


def test_usage_merge_never_decreases():
    merged = Usage(input_tokens=10, output_tokens=3).merge(Usage(input_tokens=None, output_tokens=1))
    assert merged.input_tokens == 10  # nosec B101
    assert merged.output_tokens == 3  # nosec B101
    assert merged.total_tokens == 13  # nosec B101


def test_usage_to_dict_canonical_shape():
    assert Usage(1, 2).to_dict() == {"input": 1, "output": 2, "total": 3}  # nosec B101
    assert ProviderUsage("glm-4.5", Usage(1, 2)).to_dict()["model"] == "glm-4.5"  # nosec B101


def test_model_config_fast_alias():
    cfg = ModelConfig("glm-4.5").with_fast("glm-4.5-air")
    assert cfg.fast().model_name == "glm-4.5-air"  # nosec B101
    assert cfg.fast().max_tokens == cfg.max_tokens  # nosec B101
    # an explicit fast model wins over the provider default
    assert ModelConfig("m", fast_model="mine").with_fast("other").fast_model == "mine"  # nosec B101
    plain = ModelConfig("m")
    assert plain.fast() is plain  # nosec B101
