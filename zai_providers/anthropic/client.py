"""AnthropicProvider adapter.

Talks to the Anthropic messages API directly over HTTP with the same
orchestrator and codec as :class:`~zai_providers.zai.ZaiProvider`; only the
host, endpoint path, models and configuration key names differ.

Configuration keys: ``ANTHROPIC_API_KEY`` (required, secret),
``ANTHROPIC_HOST`` and ``ANTHROPIC_TIMEOUT``.
"""

from __future__ import annotations

from ..base.adapter import MessagesProvider
from ..base.models import ConfigKey, ModelInfo, ProviderMetadata
from ..config.defaults import (
    ANTHROPIC_DEFAULT_FAST_MODEL,
    ANTHROPIC_DEFAULT_HOST,
    ANTHROPIC_DEFAULT_MODEL,
    ANTHROPIC_DOC_URL,
    ANTHROPIC_KNOWN_MODELS,
    ANTHROPIC_MESSAGES_PATH,
    DEFAULT_TIMEOUT_SECONDS,
)

ANTHROPIC_METADATA = ProviderMetadata(
    name="anthropic",
    display_name="Anthropic",
    description="Claude models through the Anthropic messages API",
    default_model=ANTHROPIC_DEFAULT_MODEL,
    known_models=tuple(ModelInfo(name, limit) for name, limit in ANTHROPIC_KNOWN_MODELS),
    doc_url=ANTHROPIC_DOC_URL,
    config_keys=(
        ConfigKey("ANTHROPIC_API_KEY", required=True, secret=True),
        ConfigKey("ANTHROPIC_HOST", required=False, secret=False, default=ANTHROPIC_DEFAULT_HOST),
        ConfigKey("ANTHROPIC_TIMEOUT", required=False, secret=False, default=str(DEFAULT_TIMEOUT_SECONDS)),
    ),
)


class AnthropicProvider(MessagesProvider):
    """Adapter for Anthropic Claude models."""

    METADATA = ANTHROPIC_METADATA
    MESSAGES_PATH = ANTHROPIC_MESSAGES_PATH
    DEFAULT_FAST_MODEL = ANTHROPIC_DEFAULT_FAST_MODEL


__all__ = ["ANTHROPIC_METADATA", "AnthropicProvider"]
