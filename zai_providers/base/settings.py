"""Resolved provider settings.

Purpose
-------
Turn the configuration keys advertised in :class:`ProviderMetadata` into a
validated :class:`ProviderSettings` object, once, at adapter construction.
Keys are matched by suffix (``*_API_KEY``, ``*_HOST``, ``*_TIMEOUT``) so every
provider can keep its own prefix.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation.

Failure modes
-------------
- Missing required key, an unreadable or malformed config file, or a value
  that fails validation raises :class:`ProviderError` with
  ``ErrorCode.CONFIGURATION`` before any request is attempted.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..config import ConfigSource, EnvConfigSource
from ..config.defaults import DEFAULT_TIMEOUT_SECONDS
from .errors import ErrorCode, ProviderError
from .models import ProviderMetadata

_FIELD_SUFFIXES = {
    "_API_KEY": "api_key",
    "_HOST": "host",
    "_TIMEOUT": "timeout_seconds",
}


class ProviderSettings(BaseModel):
    """Validated settings an adapter needs to talk to its vendor.

    Attributes
    ----------
    api_key:
        Credential sent in the auth header. Excluded from ``repr``.
    host:
        Base URL of the vendor API.
    timeout_seconds:
        Request timeout.
    extra:
        Any other advertised key, by name.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1, repr=False)
    host: str = Field(min_length=1)
    timeout_seconds: float = Field(default=float(DEFAULT_TIMEOUT_SECONDS), gt=0)
    extra: Dict[str, str] = Field(default_factory=dict)

    @field_validator("host")
    @classmethod
    def normalize_host(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("host must start with http:// or https://")
        return v


def _field_for(key_name: str) -> Optional[str]:
    for suffix, field in _FIELD_SUFFIXES.items():
        if key_name.endswith(suffix):
            return field
    return None


def _read_key(source: ConfigSource, name: str, provider: str) -> Optional[str]:
    """Read one key; an unreadable or malformed config file is a configuration error."""
    try:
        return source.get(name)
    except (ValueError, OSError) as e:
        raise ProviderError(
            code=ErrorCode.CONFIGURATION,
            message=f"cannot read configuration key {name}: {e}",
            provider=provider,
            raw=e,
        ) from e


def resolve_settings(metadata: ProviderMetadata, source: Optional[ConfigSource] = None) -> ProviderSettings:
    """Read every advertised key from ``source`` and validate the result.

    Parameters:
        metadata: Provider advertisement listing the keys to read.
        source: Configuration source; defaults to :class:`EnvConfigSource`.

    Returns:
        ProviderSettings: Validated, immutable settings.

    Raises:
        ProviderError: ``CONFIGURATION`` when a required key is missing or a
            value is invalid.
    """
    source = source or EnvConfigSource()
    values: Dict[str, Any] = {"extra": {}}
    for key in metadata.config_keys:
        raw = _read_key(source, key.name, metadata.name)
        if raw is None or not str(raw).strip():
            raw = key.default
        if raw is None:
            if key.required:
                raise ProviderError(
                    code=ErrorCode.CONFIGURATION,
                    message=f"missing required configuration key {key.name}",
                    provider=metadata.name,
                )
            continue
        field = _field_for(key.name)
        if field is None:
            values["extra"][key.name] = str(raw)
        else:
            values[field] = raw
    try:
        return ProviderSettings(**values)
    except ValidationError as e:
        raise ProviderError(
            code=ErrorCode.CONFIGURATION,
            message=f"invalid configuration: {e.errors(include_input=False)}",
            provider=metadata.name,
            raw=e,
        ) from e


__all__ = ["ProviderSettings", "resolve_settings"]
