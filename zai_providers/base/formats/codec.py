"""MessagesCodec strategy (request/response format family).

An adapter is constructed with exactly one codec and delegates every
format-specific step to it: building the request body, decoding a batch
body, decoding a stream. Capabilities (`forwards_tools`,
`supports_streaming`) are fixed per codec.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

from ..models import Message, ModelConfig, Tool, Usage
from . import anthropic_request, anthropic_response, anthropic_stream


@runtime_checkable
class MessagesCodec(Protocol):
    """Request/response format strategy used by :class:`MessagesProvider`."""

    name: str
    forwards_tools: bool
    supports_streaming: bool

    def translate(
        self,
        model_config: ModelConfig,
        system: Optional[str],
        messages: Sequence[Message],
        tools: Sequence[Tool] = (),
        *,
        stream: bool = False,
    ) -> Dict[str, Any]: ...

    def decode_batch(
        self, body: Union[str, bytes], *, provider: str, model: Optional[str] = None
    ) -> Tuple[Message, Usage]: ...

    def decode_stream(
        self, chunks: Iterable[bytes], *, provider: str, model: Optional[str] = None
    ) -> Iterator[Tuple[Message, Optional[Usage]]]: ...


class AnthropicMessagesCodec:
    """Full Anthropic messages format: tools, tool blocks, streaming."""

    name = "anthropic_messages"
    forwards_tools = True
    supports_streaming = True

    def translate(self, model_config, system, messages, tools=(), *, stream=False):
        return anthropic_request.build_payload(
            model_config, system, messages, tools, stream=stream, with_tools=self.forwards_tools
        )

    def decode_batch(self, body, *, provider, model=None):
        return anthropic_response.decode_batch(body, provider=provider, model=model)

    def decode_stream(self, chunks, *, provider, model=None):
        return anthropic_stream.decode_stream(chunks, provider=provider, model=model)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["AnthropicMessagesCodec", "MessagesCodec"]
