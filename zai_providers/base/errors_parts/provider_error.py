"""
Structured provider error exception type.

Every failure surfaced by an adapter is a `ProviderError` carrying a
normalized `ErrorCode` plus whatever diagnostic context was available at the
failure site: HTTP status and body excerpt for request failures, the frame
position for stream decode failures.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .error_code import ErrorCode

BODY_EXCERPT_LIMIT = 500


def excerpt(body: Optional[str], limit: int = BODY_EXCERPT_LIMIT) -> Optional[str]:
    """Return ``body`` truncated to ``limit`` characters (``None`` passthrough)."""
    if body is None:
        return None
    if len(body) <= limit:
        return body
    return body[:limit] + "..."


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"zai"``).
        model: Optional model name associated with the failure.
        retryable: Hint for upstream callers. Request failures set it with
            :func:`is_transient_status`, the default retry classifier.
        raw: Optional original exception for diagnostics.
        status: HTTP status code when the vendor answered.
        body: Excerpt (first ``BODY_EXCERPT_LIMIT`` characters) of the
            response body or offending frame, for logs and messages.
        response_text: The full body as received; the retry classifier reads
            this one. Not shown in ``repr``.
        position: 1-based line number of the offending stream frame.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None
    status: Optional[int] = None
    body: Optional[str] = None
    position: Optional[int] = None
    response_text: Optional[str] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.response_text = self.body
        self.body = excerpt(self.body)

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        where = f" (status {self.status})" if self.status is not None else ""
        if self.position is not None:
            where += f" (line {self.position})"
        return f"{self.provider}:{self.model or '-'} {self.code.value}{where}: {self.message}"


__all__ = ["ProviderError", "excerpt", "BODY_EXCERPT_LIMIT"]
