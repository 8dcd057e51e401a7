"""Batch response decoding for both codecs."""
from __future__ import annotations

import json

import pytest

from zai_providers.base.errors import ErrorCode, ProviderError
from zai_providers.base.formats import AnthropicMessagesCodec, PlainJsonCodec
from zai_providers.base.models import TextContent, ToolRequest, Usage

CODECS = [AnthropicMessagesCodec(), PlainJsonCodec()]


def _decode(codec, body):
    return codec.decode_batch(json.dumps(body) if not isinstance(body, (str, bytes)) else body, provider="zai", model="glm-4.5")


@pytest.mark.parametrize("codec", CODECS, ids=lambda c: c.name)
def test_scenario_a_text_and_usage(codec):
    msg, usage = _decode(codec, {"content": [{"text": "OK"}], "usage": {"input_tokens": 5, "output_tokens": 1}})
    assert msg.role == "assistant"  # nosec B101
    assert msg.as_concat_text() == "OK"  # nosec B101
    assert usage == Usage(input_tokens=5, output_tokens=1)  # nosec B101
    assert usage.total_tokens == 6  # nosec B101


@pytest.mark.parametrize("codec", CODECS, ids=lambda c: c.name)
@pytest.mark.parametrize("body", [{}, {"content": []}, {"content": None}])
def test_scenario_d_missing_content_yields_empty_text(codec, body):
    msg, usage = _decode(codec, body)
    assert msg.as_concat_text() == ""  # nosec B101
    assert usage.is_empty()  # nosec B101


def test_plain_codec_keeps_first_text_block_only():
    body = {
        "content": [
            {"type": "thinking", "thinking": "hmm"},
            {"type": "text", "text": "first"},
            {"type": "text", "text": "second"},
        ]
    }
    msg, _ = _decode(PlainJsonCodec(), body)
    assert msg.content == (TextContent("first"),)  # nosec B101


def test_anthropic_codec_keeps_text_and_tool_use_in_order():
    body = {
        "id": "msg_9",
        "content": [
            {"type": "text", "text": "Let me check."},
            {"type": "thinking", "thinking": "skip me"},
            {"type": "tool_use", "id": "toolu_1", "name": "get_weather", "input": {"city": "Paris"}},
        ],
        "usage": {"input_tokens": 12, "output_tokens": 30},
    }
    msg, usage = _decode(AnthropicMessagesCodec(), body)
    assert msg.id == "msg_9"  # nosec B101
    assert msg.content == (  # nosec B101
        TextContent("Let me check."),
        ToolRequest(id="toolu_1", name="get_weather", arguments={"city": "Paris"}),
    )
    assert usage.to_dict() == {"input": 12, "output": 30, "total": 42}  # nosec B101


def test_missing_usage_counts_stay_unknown():
    _, usage = _decode(AnthropicMessagesCodec(), {"content": [{"type": "text", "text": "x"}], "usage": {"input_tokens": 3}})
    assert usage.input_tokens == 3  # nosec B101
    assert usage.output_tokens is None  # nosec B101
    assert usage.total_tokens is None  # nosec B101


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        "[1, 2]",
        {"content": "OK"},
        {"content": [{"type": "text", "text": 5}]},
        {"content": ["OK"]},
        {"content": [{"type": "tool_use", "id": "t", "name": "n", "input": "nope"}]},
        {"content": [], "usage": "many"},
        {"content": [], "usage": {"input_tokens": "5"}},
    ],
)
def test_shape_mismatches_raise_decode(body):
    with pytest.raises(ProviderError) as ei:
        _decode(AnthropicMessagesCodec(), body)
    assert ei.value.code is ErrorCode.DECODE  # nosec B101
    assert ei.value.provider == "zai"  # nosec B101
