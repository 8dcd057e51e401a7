"""Plain JSON messages codec.

Text-only rendition of the messages format: tool declarations and tool
blocks are never sent, the batch decoder keeps the first text block only and
streaming is not offered. Callers check ``supports_streaming`` and use batch
mode.
"""
from __future__ import annotations

from ..errors import ErrorCode, ProviderError
from . import anthropic_request, anthropic_response


class PlainJsonCodec:
    name = "plain_json"
    forwards_tools = False
    supports_streaming = False

    def translate(self, model_config, system, messages, tools=(), *, stream=False):
        return anthropic_request.build_payload(model_config, system, messages, tools, stream=stream, with_tools=False)

    def decode_batch(self, body, *, provider, model=None):
        return anthropic_response.decode_batch(body, provider=provider, model=model, first_text_only=True)

    def decode_stream(self, chunks, *, provider, model=None):
        raise ProviderError(
            code=ErrorCode.VALIDATION,
            message="streaming is not supported by the plain JSON codec",
            provider=provider,
            model=model,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["PlainJsonCodec"]
