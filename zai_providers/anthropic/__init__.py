"""Anthropic provider package."""

from .client import ANTHROPIC_METADATA, AnthropicProvider

__all__ = ["ANTHROPIC_METADATA", "AnthropicProvider"]
