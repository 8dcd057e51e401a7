"""Provider registry and factory.

Adapters are registered as ``"module:Class"`` import strings and loaded on
first use, so listing metadata or creating one provider never imports the
others.

Failure semantics:
- Unknown names, import failures, missing classes and bad constructor
  arguments raise :class:`UnknownProviderError`.
- ``ProviderError`` from an adapter constructor (missing API key,
  ``ErrorCode.CONFIGURATION``) propagates unchanged.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, List, Tuple, Type

from .errors import ProviderError
from .models import ProviderMetadata


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized."""


class ProviderFactory:
    """Create provider adapters by canonical name (``"zai"``, ``"anthropic"``)."""

    _PROVIDERS: Dict[str, str] = {
        "zai": "zai_providers.zai.client:ZaiProvider",
        "anthropic": "zai_providers.anthropic.client:AnthropicProvider",
    }

    @classmethod
    def resolve(cls, provider: str) -> Type:
        """Return the adapter class registered under ``provider`` (case-insensitive)."""
        target = cls._PROVIDERS.get((provider or "").strip().lower())
        if target is None:
            raise UnknownProviderError(f"Unknown provider '{provider}'; known: {', '.join(cls.supported())}")
        module_path, _, attr = target.partition(":")
        try:
            return getattr(import_module(module_path), attr)
        except (ImportError, AttributeError) as exc:
            raise UnknownProviderError(f"Cannot load adapter {target} for '{provider}': {exc}") from exc

    @classmethod
    def create(cls, provider: str, **kwargs: Any) -> Any:
        """Instantiate the adapter for ``provider``.

        ``kwargs`` go to the adapter constructor (``model``, ``config``,
        ``transport``...).
        """
        adapter_cls = cls.resolve(provider)
        try:
            return adapter_cls(**kwargs)
        except ProviderError:
            raise
        except TypeError as exc:
            raise UnknownProviderError(f"Bad arguments for the '{provider}' adapter: {exc}") from exc

    @classmethod
    def metadata(cls, provider: str) -> ProviderMetadata:
        return cls.resolve(provider).metadata()

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        return tuple(cls._PROVIDERS)


def create_provider(provider: str, **kwargs: Any) -> Any:
    """Shorthand for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


def list_provider_metadata() -> List[ProviderMetadata]:
    """Metadata of every registered provider, in registration order."""
    return [ProviderFactory.metadata(name) for name in ProviderFactory.supported()]


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider", "list_provider_metadata"]
