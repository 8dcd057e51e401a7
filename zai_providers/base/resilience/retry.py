"""Bounded retry policy for vendor calls.

The policy decides from what the vendor said, not from exception types:
``classifier(status, body)`` recognizes transient failures (no status at all
for transport errors, 408/429, 5xx, overloaded/rate-limit error bodies) and
:meth:`RetryConfig.decide` turns that into a retry/no-retry decision plus an
exponential backoff delay. Attempts run strictly one after another.
"""
from __future__ import annotations

import functools
import time
from contextlib import suppress
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Protocol, TypeVar

from ..errors import ErrorCode, ProviderError, is_transient_status
from .retry_state import RetryState

T = TypeVar("T")

StatusClassifier = Callable[[Optional[int], Optional[str]], bool]

_STATUSLESS_RETRYABLE = (ErrorCode.TRANSPORT, ErrorCode.TIMEOUT)


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: ProviderError | None,
    ) -> None: ...


@dataclass(frozen=True)
class RetryDecision:
    retry: bool
    delay: float = 0.0


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = 3
    initial_delay: float = 1.0
    backoff_multiplier: float = 2.0
    max_delay: float = 30.0
    classifier: StatusClassifier = is_transient_status
    attempt_logger: AttemptLogger | None = None

    def delay_for(self, attempt: int) -> float:
        """Backoff before the attempt following ``attempt`` (0-based)."""
        return min(self.initial_delay * (self.backoff_multiplier**attempt), self.max_delay)

    def delays(self) -> Iterable[float]:
        for attempt in range(self.max_attempts - 1):
            yield self.delay_for(attempt)

    def decide(self, error: ProviderError, attempt: int) -> RetryDecision:
        """Decide whether the failed ``attempt`` (0-based) is followed by another."""
        if attempt + 1 >= self.max_attempts:
            return RetryDecision(retry=False)
        if error.status is None and error.code not in _STATUSLESS_RETRYABLE:
            return RetryDecision(retry=False)
        if not self.classifier(error.status, error.response_text):
            return RetryDecision(retry=False)
        return RetryDecision(retry=True, delay=self.delay_for(attempt))

    def with_attempt_logger(self, attempt_logger: AttemptLogger | None) -> "RetryConfig":
        return RetryConfig(
            max_attempts=self.max_attempts,
            initial_delay=self.initial_delay,
            backoff_multiplier=self.backoff_multiplier,
            max_delay=self.max_delay,
            classifier=self.classifier,
            attempt_logger=attempt_logger,
        )


DEFAULT_RETRY_CONFIG = RetryConfig()


def _report(config: RetryConfig, *, attempt: int, delay: float | None, error: ProviderError | None) -> None:
    if config.attempt_logger is None:
        return
    with suppress(Exception):
        config.attempt_logger(
            attempt=attempt,
            max_attempts=config.max_attempts,
            delay=delay,
            error=error,
        )


def call_with_retry(config: RetryConfig, func: Callable[[], T], state: RetryState | None = None) -> T:
    """Run ``func`` under ``config``, sleeping between attempts.

    Raises the last :class:`ProviderError` once the policy stops retrying.
    """
    state = state or RetryState()
    while True:
        try:
            result = func()
        except ProviderError as e:
            state.record_failure(e)
            decision = config.decide(e, state.attempt)
            _report(config, attempt=state.attempt, delay=decision.delay if decision.retry else None, error=e)
            if not decision.retry:
                raise
            time.sleep(decision.delay)
            state.attempt += 1
            continue
        _report(config, attempt=state.attempt, delay=None, error=None)
        return result


def retry(config: RetryConfig = DEFAULT_RETRY_CONFIG):
    """Return a decorator applying ``config`` to the wrapped callable."""

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            return call_with_retry(config, lambda: func(*args, **kwargs))

        return wrapper

    return decorator


__all__ = [
    "AttemptLogger",
    "RetryConfig",
    "RetryDecision",
    "DEFAULT_RETRY_CONFIG",
    "call_with_retry",
    "is_transient_status",
    "retry",
]
