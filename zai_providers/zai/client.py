"""ZaiProvider adapter.

Z.ai serves its GLM models behind an Anthropic-compatible messages endpoint
(``/api/anthropic/v1/messages``). The adapter is the shared
:class:`MessagesProvider` pointed at that endpoint with the full messages
codec, so tool declarations and tool blocks are forwarded and streaming is
available.

Configuration keys (read once, at construction):
* ``ZAI_API_KEY`` (required, secret)
* ``ZAI_HOST`` (default ``https://api.z.ai``)
* ``ZAI_TIMEOUT`` (seconds, default ``600``)

``complete_fast`` uses ``glm-4.5-air`` unless the caller configured another
fast model.
"""

from __future__ import annotations

from ..base.adapter import MessagesProvider
from ..base.models import ConfigKey, ModelInfo, ProviderMetadata
from ..config.defaults import (
    DEFAULT_TIMEOUT_SECONDS,
    ZAI_DEFAULT_FAST_MODEL,
    ZAI_DEFAULT_HOST,
    ZAI_DEFAULT_MODEL,
    ZAI_DOC_URL,
    ZAI_KNOWN_MODELS,
    ZAI_MESSAGES_PATH,
)

ZAI_METADATA = ProviderMetadata(
    name="zai",
    display_name="Z.ai",
    description="GLM models served by Z.ai through its Anthropic-compatible API",
    default_model=ZAI_DEFAULT_MODEL,
    known_models=tuple(ModelInfo(name, limit) for name, limit in ZAI_KNOWN_MODELS),
    doc_url=ZAI_DOC_URL,
    config_keys=(
        ConfigKey("ZAI_API_KEY", required=True, secret=True),
        ConfigKey("ZAI_HOST", required=False, secret=False, default=ZAI_DEFAULT_HOST),
        ConfigKey("ZAI_TIMEOUT", required=False, secret=False, default=str(DEFAULT_TIMEOUT_SECONDS)),
    ),
)


class ZaiProvider(MessagesProvider):
    """Adapter for Z.ai GLM models."""

    METADATA = ZAI_METADATA
    MESSAGES_PATH = ZAI_MESSAGES_PATH
    DEFAULT_FAST_MODEL = ZAI_DEFAULT_FAST_MODEL


__all__ = ["ZAI_METADATA", "ZaiProvider"]
