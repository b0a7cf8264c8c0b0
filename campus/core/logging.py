"""Root logger setup for campus-service.

Human-readable lines by default; JSON lines when LOG_JSON=true. Services
log committed changes at INFO and rejected operations at WARNING.
"""

from __future__ import annotations

import json
import logging
import sys

DATE_FMT = "%Y-%m-%dT%H:%M:%S%z"

# Attributes set by RequestContextMiddleware or passed via ``extra=``.
CONTEXT_FIELDS = (
    "request_id",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "error_kind",
)

_QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "httpcore", "httpx")


class _ContainerFormatter(logging.Formatter):
    """One line per record; WARNING and above get a [file:line] suffix."""

    def __init__(self) -> None:
        super().__init__(datefmt=DATE_FMT)
        self._plain = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s  %(message)s", datefmt=DATE_FMT
        )
        self._located = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s  %(message)s  [%(filename)s:%(lineno)d]",
            datefmt=DATE_FMT,
        )

    def format(self, record: logging.LogRecord) -> str:
        inner = self._located if record.levelno >= logging.WARNING else self._plain
        return inner.format(record)


class _JsonFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(datefmt=DATE_FMT)

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value)
            for key in CONTEXT_FIELDS
            if (value := getattr(record, key, None)) is not None and value != "-"
        )
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level_name: str, *, json_format: bool = False) -> None:
    """Replace root handlers with a single stdout handler at ``level_name``."""
    level = getattr(logging, level_name.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_JsonFormatter() if json_format else _ContainerFormatter())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
