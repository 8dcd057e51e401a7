"""
Error classification helpers mapping failures to normalized ErrorCode values.

Two entry points:

* :func:`classify_exception` for exceptions raised before a status is known
  (connection resets, timeouts) or coming from foreign code.
* :func:`error_from_status` for vendor answers with a non-2xx status.
"""
from __future__ import annotations

from typing import Dict, Optional

import httpx

from .error_code import ErrorCode
from .provider_error import ProviderError


def _extract_status(exc: Exception) -> Optional[int]:
    """HTTP status carried by ``exc`` itself or by its ``response``, if any."""
    candidates = (
        getattr(exc, "status_code", None),
        getattr(exc, "status", None),
        getattr(getattr(exc, "response", None), "status_code", None),
    )
    return next((c for c in candidates if isinstance(c, int) and 100 <= c < 600), None)


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
    529: ErrorCode.UNAVAILABLE,
}

_TRANSIENT_BODY_MARKERS = ("overloaded_error", "rate_limit_error")

# Anthropic-format error ``type`` values as found in error bodies and
# streamed ``error`` events.
_VENDOR_ERROR_TYPES: Dict[str, ErrorCode] = {
    "invalid_request_error": ErrorCode.VALIDATION,
    "authentication_error": ErrorCode.AUTH,
    "permission_error": ErrorCode.AUTH,
    "not_found_error": ErrorCode.NOT_FOUND,
    "request_too_large": ErrorCode.VALIDATION,
    "rate_limit_error": ErrorCode.RATE_LIMIT,
    "api_error": ErrorCode.SERVER_ERROR,
    "overloaded_error": ErrorCode.UNAVAILABLE,
}


def is_transient_status(status: Optional[int], body: Optional[str]) -> bool:
    """Return True when ``(status, body)`` looks like a failure worth retrying.

    ``status`` is ``None`` for failures before any response arrived. Besides
    408/429 and 5xx, an error body naming an overloaded or rate-limit error
    is transient whatever its status.
    """
    if status is None:
        return True
    if status in (408, 429) or status >= 500:
        return True
    if body:
        lowered = body.lower()
        return any(marker in lowered for marker in _TRANSIENT_BODY_MARKERS)
    return False


def code_for_status(status: int) -> ErrorCode:
    """Map an HTTP status to an :class:`ErrorCode` (5xx default to server error)."""
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if status >= 500:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


def code_for_vendor_error(error_type: Optional[str]) -> ErrorCode:
    """Map a vendor error ``type`` string to an :class:`ErrorCode`."""
    if not error_type:
        return ErrorCode.UNKNOWN
    return _VENDOR_ERROR_TYPES.get(error_type, ErrorCode.SERVER_ERROR)


def _code_from_message(msg: str) -> Optional[ErrorCode]:
    """Substring heuristic mapping for exceptions without a status."""
    if "rate" in msg and "limit" in msg:
        return ErrorCode.RATE_LIMIT
    for code, needles in (
        (ErrorCode.TIMEOUT, ("timeout", "timed out")),
        (ErrorCode.AUTH, ("unauthorized", "forbidden", "api key")),
        (ErrorCode.UNAVAILABLE, ("unavailable", "overloaded")),
        (ErrorCode.TRANSPORT, ("connection", "reset by peer")),
    ):
        if any(n in msg for n in needles):
            return code
    return None


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Checked in order:
        1. A ProviderError keeps its own code.
        2. Timeout exceptions (stdlib and httpx).
        3. httpx transport and stream-state errors (connection refused/reset,
           protocol errors, a response stream that was closed or consumed).
        4. HTTP status mapping.
        5. Substring heuristics.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (httpx.TransportError, httpx.StreamError)):
        return ErrorCode.TRANSPORT
    status = _extract_status(exc)
    if status is not None:
        return code_for_status(status)
    code = _code_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


def error_from_exception(exc: Exception, *, provider: str, model: Optional[str] = None) -> ProviderError:
    """Wrap a foreign exception into a classified :class:`ProviderError`."""
    if isinstance(exc, ProviderError):
        return exc
    code = classify_exception(exc)
    return ProviderError(
        code=code,
        message=str(exc) or type(exc).__name__,
        provider=provider,
        model=model,
        retryable=code in (ErrorCode.TRANSPORT, ErrorCode.TIMEOUT),
        raw=exc,
    )


def error_from_status(
    status: int,
    body: Optional[str],
    *,
    provider: str,
    model: Optional[str] = None,
) -> ProviderError:
    """Build the request-failure error for a non-2xx vendor answer."""
    return ProviderError(
        code=code_for_status(status),
        message=f"API request failed with status {status}",
        provider=provider,
        model=model,
        retryable=is_transient_status(status, body),
        status=status,
        body=body,
    )


__all__ = [
    "classify_exception",
    "code_for_status",
    "code_for_vendor_error",
    "error_from_exception",
    "error_from_status",
    "is_transient_status",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
