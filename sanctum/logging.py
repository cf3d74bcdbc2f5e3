"""
Structured Logging — Sanctum Log Records

Every sanctum module logs through a child of the "sanctum" logger.
Records are written one per line to stdout, as JSON in production or
as plain text while developing (SANCTUM_LOG_FORMAT=json|text).

Only allow-listed context fields are copied from `extra` into a JSON
record. User text is never among them: detectors and the adapter log
what they decided (severity, type, tradition, fallback), not what the
user wrote.

Usage:
    from sanctum.logging import get_logger
    logger = get_logger("detector")
    logger.debug("Detection", extra={"detector": "crisis", "severity": 3})
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone


LOG_LEVEL = os.getenv("SANCTUM_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("SANCTUM_LOG_FORMAT", "json")

ROOT_LOGGER = "sanctum"

# Context keys copied from `extra` into JSON records
EXTRA_FIELDS = (
    # detection
    "detector", "severity", "type", "indicators_count",
    # adaptation and gating
    "tradition", "fallback", "content_type", "tier",
    # failures
    "error", "error_type",
    # http
    "method", "path", "status_code", "duration_ms",
)

# Third-party loggers that drown out request logs at INFO
QUIET_LOGGERS = ("uvicorn.access", "httpx")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with allow-listed context."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key))
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info and record.exc_info[0]:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class TextFormatter(logging.Formatter):
    """Single-line console format."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s %(levelname)-8s %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )


_FORMATTERS = {
    "json": JSONFormatter,
    "text": TextFormatter,
}


def setup_logging(level: str = LOG_LEVEL, fmt: str = LOG_FORMAT) -> logging.Logger:
    """
    (Re)configure the "sanctum" logger with a single stdout handler.

    Safe to call more than once; earlier handlers are replaced. Unknown
    levels fall back to INFO and unknown formats to text.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_FORMATTERS.get(fmt, TextFormatter)())
    root.handlers[:] = [handler]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
