"""JSON logging formatter used by the provider logging setup.

Messages that are themselves JSON objects (as produced by
:func:`zai_providers.base.logging.log_event`) are merged into the top level
so emitted lines are not double-encoded. Attributes passed through
``extra=`` are kept as well.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

# Attribute names every LogRecord carries; anything else came from ``extra=``.
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime", "taskName"}


def _as_object(text: str) -> Dict[str, Any] | None:
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


class JsonFormatter(logging.Formatter):
    """One JSON object per record: ``ts``, ``level``, ``logger`` plus the event fields."""

    def format(self, record: logging.LogRecord) -> str:
        text = record.getMessage()
        out: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        out.update(_as_object(text) or {"msg": text})
        for key, value in vars(record).items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                out.setdefault(key, value)
        if record.exc_info:
            out["exc"] = self.formatException(record.exc_info)
        return json.dumps(out, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
