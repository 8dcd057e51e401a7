"""Request body translation for the messages codecs."""
from __future__ import annotations

import json

import pytest

from zai_providers.base.formats import AnthropicMessagesCodec, PlainJsonCodec
from zai_providers.base.models import (
    Message,
    ModelConfig,
    TextContent,
    Tool,
    ToolRequest,
    ToolResponse,
)

CFG = ModelConfig("glm-4.5")
WEATHER = Tool(
    name="get_weather",
    description="Current weather",
    input_schema={"type": "object", "properties": {"city": {"type": "string"}}},
)


def _tool_turns():
    return [
        Message.user("weather in Paris?"),
        Message(role="assistant", content=(TextContent("Checking."), ToolRequest("toolu_1", "get_weather", {"city": "Paris"}))),
        Message(role="user", content=(ToolResponse("toolu_1", "18C, cloudy"),)),
    ]


def test_basic_payload_shape():
    payload = AnthropicMessagesCodec().translate(
        CFG, "You are a helpful assistant.", [Message.user("Hello, can you respond with just 'OK'?")]
    )
    assert payload == {  # nosec B101
        "model": "glm-4.5",
        "max_tokens": 8192,
        "messages": [{"role": "user", "content": "Hello, can you respond with just 'OK'?"}],
        "system": "You are a helpful assistant.",
    }


@pytest.mark.parametrize("system", [None, "", "   \n\t"])
def test_blank_system_is_omitted(system):
    payload = AnthropicMessagesCodec().translate(CFG, system, [Message.user("x")])
    assert "system" not in payload  # nosec B101


def test_max_tokens_and_temperature_from_model_config():
    cfg = ModelConfig("glm-4.6", max_tokens=256, temperature=0.2)
    payload = AnthropicMessagesCodec().translate(cfg, None, [Message.user("x")])
    assert payload["max_tokens"] == 256  # nosec B101
    assert payload["temperature"] == 0.2  # nosec B101
    assert "temperature" not in AnthropicMessagesCodec().translate(CFG, None, [Message.user("x")])  # nosec B101


def test_text_blocks_are_concatenated_per_message():
    msg = Message(role="user", content=(TextContent("Hello, "), TextContent("world")))
    payload = AnthropicMessagesCodec().translate(CFG, None, [msg])
    assert payload["messages"] == [{"role": "user", "content": "Hello, world"}]  # nosec B101


def test_streaming_adds_only_stream_flag():
    codec = AnthropicMessagesCodec()
    msgs = [Message.user("x")]
    batch = codec.translate(CFG, "sys", msgs)
    streaming = codec.translate(CFG, "sys", msgs, stream=True)
    assert streaming.pop("stream") is True  # nosec B101
    assert streaming == batch  # nosec B101
    assert "stream" not in batch  # nosec B101


def test_translation_is_deterministic():
    codec = AnthropicMessagesCodec()
    a = json.dumps(codec.translate(CFG, "sys", _tool_turns(), [WEATHER]))
    b = json.dumps(codec.translate(CFG, "sys", _tool_turns(), [WEATHER]))
    assert a == b  # nosec B101


def test_invalid_role_fails_fast():
    bad = Message(role="system", content=(TextContent("x"),))  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        AnthropicMessagesCodec().translate(CFG, None, [bad])


def test_anthropic_codec_encodes_tool_blocks_and_declarations():
    payload = AnthropicMessagesCodec().translate(CFG, None, _tool_turns(), [WEATHER])
    assert payload["tools"] == [  # nosec B101
        {
            "name": "get_weather",
            "description": "Current weather",
            "input_schema": {"type": "object", "properties": {"city": {"type": "string"}}},
        }
    ]
    assistant, tool_result = payload["messages"][1], payload["messages"][2]
    assert assistant["content"] == [  # nosec B101
        {"type": "text", "text": "Checking."},
        {"type": "tool_use", "id": "toolu_1", "name": "get_weather", "input": {"city": "Paris"}},
    ]
    assert tool_result["content"] == [  # nosec B101
        {"type": "tool_result", "tool_use_id": "toolu_1", "content": "18C, cloudy"}
    ]


def test_tool_result_error_flag_is_forwarded():
    msg = Message(role="user", content=(ToolResponse("toolu_1", "boom", is_error=True),))
    payload = AnthropicMessagesCodec().translate(CFG, None, [msg])
    assert payload["messages"][0]["content"][0]["is_error"] is True  # nosec B101


def test_plain_codec_never_forwards_tools():
    codec = PlainJsonCodec()
    assert codec.forwards_tools is False  # nosec B101
    payload = codec.translate(CFG, None, _tool_turns(), [WEATHER])
    assert "tools" not in payload  # nosec B101
    assert payload["messages"][1] == {"role": "assistant", "content": "Checking."}  # nosec B101
    assert payload["messages"][2] == {"role": "user", "content": ""}  # nosec B101
