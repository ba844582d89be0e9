"""JSON-lines logging for the redirector.

Every record becomes one object on stdout: ``ts``, ``level``, ``logger``,
``message`` plus the structured fields the call passed through ``extra``
(``path``, ``location``, ``outcome``, ...).
"""
from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

__all__ = ["LEVELS", "JsonFormatter", "parse_level", "setup_logging", "get_logger"]

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Attributes of a bare LogRecord; anything else on a record came from `extra`.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in payload
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def parse_level(level: str) -> int:
    """Map a level name to its number; unknown names raise ValueError."""
    name = level.strip().upper()
    if name not in LEVELS:
        raise ValueError(f"unknown log level {level!r}, expected one of {', '.join(LEVELS)}")
    return logging.getLevelName(name)


def setup_logging(level: str) -> None:
    """Send JSON lines to stdout at `level` and route uvicorn's loggers there too.

    A root logger that already has handlers (reload, pytest) is left as is.
    """
    numeric = parse_level(level)
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonFormatter())
    root.setLevel(numeric)
    root.addHandler(handler)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.propagate = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger namespaced under ``redirector``."""
    return logging.getLogger(f"redirector.{name}" if name else "redirector")
