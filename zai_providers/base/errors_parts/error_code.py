"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration used across the adapter, the retry policy
and structured logging. Values are lowercase snake_case and are considered a
stable public contract for logs and callers.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    TRANSPORT = "transport"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    DECODE = "decode"
    STREAM_DECODE = "stream_decode"
    INCOMPLETE_STREAM = "incomplete_stream"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
