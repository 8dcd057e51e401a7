"""Per-call request logging collaborator.

One `RequestLog` is created for each logical call. It records the request,
every physical attempt, and the final outcome as normalized structured
events on the shared ``zai_providers`` logger.

Logging is strictly best-effort: every method swallows its own failures so a
broken handler can never change the outcome of a call.
"""
from __future__ import annotations

import logging
import uuid
from contextlib import suppress
from typing import Any, Mapping, Optional

from .errors import ProviderError
from .logging import LogContext, get_logger, normalized_log_event
from .models import Message, Usage


class RequestLog:
    """Structured request/response log for one logical call."""

    def __init__(
        self,
        *,
        provider: str,
        model: str,
        mode: str = "batch",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or get_logger(f"{provider}.requests")
        self.ctx = LogContext(provider=provider, model=model, request_id=uuid.uuid4().hex, mode=mode)

    @classmethod
    def start(
        cls,
        *,
        provider: str,
        model: str,
        payload: Mapping[str, Any],
        mode: str = "batch",
        logger: Optional[logging.Logger] = None,
    ) -> "RequestLog":
        """Create the log and record the outgoing request summary."""
        log = cls(provider=provider, model=model, mode=mode, logger=logger)
        with suppress(Exception):
            normalized_log_event(
                log.logger,
                "request.start",
                log.ctx,
                phase="start",
                messages=len(payload.get("messages") or ()),
                tools=len(payload.get("tools") or ()),
                stream=bool(payload.get("stream", False)),
                max_tokens=payload.get("max_tokens"),
            )
        return log

    def attempt(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: ProviderError | None,
    ) -> None:
        """Record one physical attempt (matches the retry attempt logger)."""
        with suppress(Exception):
            normalized_log_event(
                self.logger,
                "request.attempt",
                self.ctx,
                phase="attempt",
                attempt=attempt,
                error_code=error.code.value if error is not None else None,
                level=logging.WARNING if error is not None else logging.DEBUG,
                max_attempts=max_attempts,
                retry_in=delay,
                status=error.status if error is not None else None,
            )

    def write(self, message: Optional[Message], usage: Optional[Usage], *, emitted: int | None = None) -> None:
        """Record a successful completion."""
        with suppress(Exception):
            normalized_log_event(
                self.logger,
                "request.end",
                self.ctx,
                phase="finalize",
                emitted=emitted if emitted is not None else True,
                tokens=usage,
                message_id=message.id if message is not None else None,
                chars=len(message.as_concat_text()) if message is not None else None,
            )

    def error(self, err: ProviderError) -> None:
        """Record a failed call."""
        with suppress(Exception):
            normalized_log_event(
                self.logger,
                "request.error",
                self.ctx,
                phase="finalize",
                error_code=err.code.value,
                emitted=False,
                level=logging.ERROR,
                status=err.status,
                position=err.position,
                error=err.message,
            )


__all__ = ["RequestLog"]
