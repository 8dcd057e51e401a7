"""Read-only configuration sources for providers.

Goals
-----
* Adapters read their settings once, at construction, from an injected
  :class:`ConfigSource`; nothing re-reads ambient state mid-call.
* The default source merges values in a predictable order (first hit wins):
    1. In-code overrides passed to :class:`EnvConfigSource`
    2. Process environment variables (e.g. ``ZAI_API_KEY``)
    3. Optional external JSON file pointed to by ``ZAI_PROVIDERS_CONFIG_FILE``
  ``ConfigKey.default`` values are applied afterwards by
  :func:`zai_providers.base.settings.resolve_settings`.
* Persistence of secrets is out of scope: sources only read.

External Config File (Optional)
-------------------------------
A flat JSON object keyed by configuration key name::

    {"ZAI_HOST": "https://api.z.ai", "ZAI_TIMEOUT": "300"}

Public API
----------
* ConfigSource (protocol)
* EnvConfigSource(overrides=None)
* MappingConfigSource(values)
* load_config_file(path=None) -> dict
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

CONFIG_FILE_ENV = "ZAI_PROVIDERS_CONFIG_FILE"

_FILE_CACHE: Dict[str, Dict[str, Any]] = {}


@runtime_checkable
class ConfigSource(Protocol):
    """Read-only key/value lookup used at adapter construction."""

    def get(self, name: str) -> Optional[str]:
        """Return the raw string value for ``name`` or ``None`` when unset."""
        ...


def load_config_file(path: Optional[str] = None) -> Dict[str, Any]:
    """Load (and cache) the flat JSON config file.

    Returns an empty mapping when no path is configured or the file does not
    exist. A file that exists but is not a JSON object raises ``ValueError``
    so a broken config is not silently ignored.
    """
    path = path or os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    if path in _FILE_CACHE:
        return _FILE_CACHE[path]
    p = Path(path).expanduser()
    if not p.exists():
        _FILE_CACHE[path] = {}
        return _FILE_CACHE[path]
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"config file {p} must contain a JSON object")
    _FILE_CACHE[path] = data
    return data


def clear_config_cache() -> None:
    """Forget cached config file contents (tests, reloads)."""
    _FILE_CACHE.clear()


class MappingConfigSource:
    """Config source backed by a caller-supplied mapping."""

    def __init__(self, values: Mapping[str, Any]) -> None:
        self._values = dict(values)

    def get(self, name: str) -> Optional[str]:
        val = self._values.get(name)
        return None if val is None else str(val)

    def __repr__(self) -> str:
        return f"MappingConfigSource(keys={sorted(self._values)})"


class EnvConfigSource:
    """Layered source: overrides → environment → config file."""

    def __init__(self, overrides: Optional[Mapping[str, Any]] = None, *, config_file: Optional[str] = None) -> None:
        self._overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        self._config_file = config_file

    def get(self, name: str) -> Optional[str]:
        if name in self._overrides:
            return str(self._overrides[name])
        env_val = os.environ.get(name)
        if env_val:
            return env_val
        file_val = load_config_file(self._config_file).get(name)
        return None if file_val is None else str(file_val)


__all__ = [
    "CONFIG_FILE_ENV",
    "ConfigSource",
    "EnvConfigSource",
    "MappingConfigSource",
    "clear_config_cache",
    "load_config_file",
]
