"""Pytest configuration for the providers test suite.

Shared fixtures:
- ``sleeps``: replaces ``time.sleep`` and records the requested delays.
- ``captured_logs``: collects the JSON events emitted under ``zai_providers.zai``.
- ``make_zai``: builds a :class:`ZaiProvider` whose HTTP traffic goes to an
  ``httpx.MockTransport`` handler.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Dict, Iterator, List

import httpx
import pytest

from zai_providers.config import MappingConfigSource, clear_config_cache


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - exercised via tests
        self.records.append(record)

    def events(self) -> List[Dict[str, Any]]:
        return [json.loads(r.getMessage()) for r in self.records]


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep developer environment and config-file cache out of every test."""
    for name in ("ZAI_API_KEY", "ZAI_HOST", "ZAI_TIMEOUT", "ANTHROPIC_API_KEY", "ZAI_PROVIDERS_CONFIG_FILE"):
        monkeypatch.delenv(name, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture()
def sleeps(monkeypatch: pytest.MonkeyPatch) -> List[float]:
    """Make retry backoff instant and record each requested delay."""
    delays: List[float] = []
    monkeypatch.setattr(time, "sleep", lambda seconds: delays.append(seconds))
    return delays


@pytest.fixture()
def captured_logs() -> Iterator[_ListHandler]:
    from zai_providers.base.logging import get_logger

    logger = get_logger("zai")
    handler = _ListHandler()
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(previous)


@pytest.fixture()
def zai_config() -> MappingConfigSource:
    return MappingConfigSource({"ZAI_API_KEY": "test-key"})


@pytest.fixture()
def make_zai(zai_config: MappingConfigSource) -> Callable[..., Any]:
    """Return a factory ``make_zai(handler, **kwargs) -> ZaiProvider``."""
    from zai_providers.zai import ZaiProvider

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> ZaiProvider:
        kwargs.setdefault("config", zai_config)
        return ZaiProvider(transport=httpx.MockTransport(handler), **kwargs)

    return _make
