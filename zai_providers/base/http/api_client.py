"""Vendor API client.

`ApiClient` binds a host, an authentication header and fixed vendor headers
(API version) to an ``httpx.Client``. It is configured once at adapter
construction and shared read-only by every call; it holds no per-call state.

Two operations:

* :meth:`ApiClient.post` sends a JSON body and returns the fully read
  response (batch mode).
* :meth:`ApiClient.open_stream` sends a JSON body and returns the response
  with its body still unread (streaming mode). The caller owns closing it.

Transport failures are raised as classified :class:`ProviderError` values
(``transport`` / ``timeout``) without a status.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx

from ..errors import error_from_exception
from .client import get_httpx_client


@dataclass(frozen=True)
class AuthMethod:
    """Credential sent as a fixed header name/value pair."""

    header_name: str
    key: str

    def headers(self) -> Dict[str, str]:
        return {self.header_name: self.key}

    def __repr__(self) -> str:  # keep keys out of logs and tracebacks
        return f"AuthMethod(header_name={self.header_name!r}, key='***')"


class ApiClient:
    """Thin JSON-over-HTTP client for one vendor host."""

    def __init__(
        self,
        host: str,
        auth: AuthMethod,
        *,
        timeout: float = 600.0,
        headers: Optional[Mapping[str, str]] = None,
        provider: str = "unknown",
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Create a client for ``host``.

        Parameters:
            host: Base URL, e.g. ``https://api.z.ai``.
            auth: Authentication header.
            timeout: Request timeout in seconds.
            headers: Extra fixed headers sent with every request.
            provider: Provider key used in error context.
            transport: Optional ``httpx`` transport (tests inject
                ``httpx.MockTransport``). When given, a private client is
                created instead of using the shared pool.
        """
        self.host = host.rstrip("/")
        self.timeout = timeout
        self.provider = provider
        self._auth = auth
        self._headers: Dict[str, str] = {"Content-Type": "application/json", **dict(headers or {})}
        if transport is not None:
            self._client = httpx.Client(base_url=self.host, timeout=timeout, transport=transport)
        else:
            self._client = get_httpx_client(self.host, purpose=f"{provider}.messages", timeout=timeout)

    def with_header(self, name: str, value: str) -> "ApiClient":
        """Add a fixed header (construction-time only); returns ``self``."""
        self._headers[name] = value
        return self

    def _request_headers(self) -> Dict[str, str]:
        return {**self._headers, **self._auth.headers()}

    def _build(self, path: str, payload: Mapping[str, Any]) -> httpx.Request:
        return self._client.build_request(
            "POST",
            "/" + path.lstrip("/"),
            json=payload,
            headers=self._request_headers(),
        )

    def post(self, path: str, payload: Mapping[str, Any], *, model: Optional[str] = None) -> httpx.Response:
        """POST ``payload`` and return the fully read response."""
        try:
            return self._client.send(self._build(path, payload))
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise error_from_exception(e, provider=self.provider, model=model) from e

    def open_stream(self, path: str, payload: Mapping[str, Any], *, model: Optional[str] = None) -> httpx.Response:
        """POST ``payload`` and return the response with an unread body.

        The caller must close the returned response.
        """
        try:
            return self._client.send(self._build(path, payload), stream=True)
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise error_from_exception(e, provider=self.provider, model=model) from e


__all__ = ["ApiClient", "AuthMethod"]
