"""Shared HTTP client pool for providers.

Purpose:
    Keep one reusable ``httpx.Client`` per ``(base_url, purpose, timeout)``
    so adapters do not pay connection setup on every call. Clients carry only
    read-only configuration (base URL, timeout); credentials and per-vendor
    headers are sent per request by :class:`ApiClient`.

Lifecycle & cleanup:
    All pooled clients are closed at interpreter exit via ``atexit``; tests
    may call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

_CLIENTS: Dict[Tuple[Optional[str], str, float], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str, timeout: float = 600.0) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL, purpose and timeout.

    Parameters:
        base_url: API base URL set on the client so callers can use relative
            paths. ``None`` groups clients under a shared key.
        purpose: Short string discriminating separate pools (e.g.,
            ``"zai.messages"``).
        timeout: Request timeout in seconds.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant
        lock.
    """
    key = (base_url, purpose, float(timeout))
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        if base_url:
            client = httpx.Client(base_url=base_url, timeout=timeout)
        else:
            client = httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except Exception:  # nosec B110 - best-effort shutdown
                pass
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
