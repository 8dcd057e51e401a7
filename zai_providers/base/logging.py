"""Base structured logging utilities for the provider layer.

Every module obtains its logger through :func:`get_logger`, which hangs it
under the shared ``zai_providers`` logger. That base logger writes one JSON
object per line to stderr; :func:`configure_logger` adjusts the level and
optionally attaches a rotating file handler at runtime.

Events are emitted with :func:`normalized_log_event`, which guarantees the
canonical keys ``structured``, ``phase``, ``attempt``, ``error_code``,
``emitted`` and ``tokens`` so downstream aggregation does not depend on the
call site.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Iterable, Mapping, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "zai_providers"
LOG_LEVEL_ENV = "ZAI_PROVIDERS_LOG_LEVEL"

_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_FILE_MAX_BYTES = 10 * 1024 * 1024
_FILE_BACKUPS = 5

# Markers set on objects this module created, so reconfiguration only
# touches its own handlers.
_READY_MARK = "_zai_logging_ready"
_FILE_MARK = "_zai_file_handler"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Map a level name (case-insensitive) to its number; ``default`` when unknown."""
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Return the shared base logger, installing its stderr handler on first use.

    ``ZAI_PROVIDERS_LOG_LEVEL``, when set, wins over ``level`` on every call.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    env_level = os.getenv(LOG_LEVEL_ENV)
    ready = getattr(base, _READY_MARK, False)
    if env_level or not ready:
        base.setLevel(_parse_level(env_level, default=level))
    if ready:
        return base
    wanted = base.level
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(wanted)
    console.setFormatter(_formatter(json_mode))
    base.handlers[:] = [console]
    base.propagate = False
    setattr(base, _READY_MARK, True)
    return base


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a logger under the shared ``zai_providers`` hierarchy.

    Child names are prefixed with the base name when needed so records always
    reach the base handler (``get_logger("zai")`` → ``zai_providers.zai``).
    """
    base = _base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base
    prefix = BASE_LOGGER_NAME + "."
    child = logging.getLogger(name if name.startswith(prefix) else prefix + name)
    child.propagate = True
    return child


def _close_handlers(logger: logging.Logger, handlers: Iterable[logging.Handler]) -> None:
    for h in list(handlers):
        logger.removeHandler(h)
        with contextlib.suppress(Exception):
            h.close()


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level:
        Numeric level or level name; ``None`` keeps the current level.
    file_path:
        Attach (or keep) a rotating file handler writing to this path.
        ``None`` removes any file handler attached earlier.
    json_mode:
        JSON formatter (default) or plain text for the file handler.

    Returns
    -------
    logging.Logger
        The configured base logger.
    """
    base = get_logger(json_mode=json_mode)
    if level is not None:
        numeric = _parse_level(level, default=base.level) if isinstance(level, str) else level
        base.setLevel(numeric)
        for h in base.handlers:
            h.setLevel(numeric)

    file_handlers = [h for h in base.handlers if getattr(h, _FILE_MARK, False)]
    if file_path is None:
        _close_handlers(base, file_handlers)
        return base

    target = os.path.abspath(os.path.expanduser(file_path))
    keep = [h for h in file_handlers if getattr(h, "baseFilename", None) == target]
    _close_handlers(base, [h for h in file_handlers if h not in keep])
    if keep:
        keep[0].setFormatter(_formatter(json_mode))
        keep[0].setLevel(base.level)
        return base

    os.makedirs(os.path.dirname(target), exist_ok=True)
    handler = RotatingFileHandler(target, maxBytes=_FILE_MAX_BYTES, backupCount=_FILE_BACKUPS, encoding="utf-8")
    setattr(handler, _FILE_MARK, True)
    handler.setLevel(base.level)
    handler.setFormatter(_formatter(json_mode))
    base.addHandler(handler)
    return base


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit ``event`` plus context and fields as one JSON line.

    ``None`` values are dropped unless ``keep_none`` is set.
    """
    record: Dict[str, Any] = {"event": event, **(ctx.to_dict() if ctx else {})}
    record.update(fields if keep_none else {k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(record, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = (
    "structured",
    "phase",
    "attempt",
    "error_code",
    "emitted",
    "tokens",
)


def _coerce_tokens(tokens: Any) -> Any:
    """Return token usage as a JSON-friendly mapping (or ``None``)."""
    if tokens is None:
        return None
    to_dict = getattr(tokens, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(tokens, Mapping):
        return dict(tokens)
    return {"value": repr(tokens)}


def normalized_log_event(  # noqa: PLR0913
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: int | bool | None = None,
    tokens: Any = None,
    structured: bool = True,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit an event carrying the normalized keys.

    ``error_code`` is left out when ``None``; the other normalized keys are
    always present (``null`` when unknown). Extra fields never overwrite a
    normalized key and are dropped when ``None``.
    """
    normalized: Dict[str, Any] = {
        "structured": structured,
        "phase": phase,
        "attempt": attempt,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is not None:
        normalized["error_code"] = error_code
    extras = {k: v for k, v in extra_fields.items() if v is not None and k not in normalized}
    log_event(logger, event, ctx, level=level, keep_none=True, **normalized, **extras)


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
