"""Resilience helpers (retry policy and per-call retry state)."""

from .retry import (
    DEFAULT_RETRY_CONFIG,
    RetryConfig,
    RetryDecision,
    call_with_retry,
    is_transient_status,
    retry,
)
from .retry_state import RetryState

__all__ = [
    "DEFAULT_RETRY_CONFIG",
    "RetryConfig",
    "RetryDecision",
    "RetryState",
    "call_with_retry",
    "is_transient_status",
    "retry",
]
