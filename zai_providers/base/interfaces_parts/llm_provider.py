"""LLMProvider Protocol (single-class module).

Defines the batch completion contract shared by provider adapters.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple, runtime_checkable

from ..models import Message, ModelConfig, ProviderUsage, Tool


@runtime_checkable
class LLMProvider(Protocol):
    """Minimal interface for Large Language Model providers.

    Implementations translate canonical messages into their vendor request,
    return canonical ``(Message, ProviderUsage)`` pairs and never leak vendor
    payloads upstream. Failures are raised as ``ProviderError``.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g., ``"zai"`` or ``"anthropic"``."""
        ...

    def get_model_config(self) -> ModelConfig:
        """Model configuration used by :meth:`complete`."""
        ...

    def complete_once(
        self,
        model_config: ModelConfig,
        system: Optional[str],
        messages: Sequence[Message],
        tools: Sequence[Tool] = (),
    ) -> Tuple[Message, ProviderUsage]:
        """Execute one batch completion for ``model_config``."""
        ...
