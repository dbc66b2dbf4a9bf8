"""Structured Logging: JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (habit_id, owner_id, error_code, path, method) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: calling it twice never duplicates output
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("habit_id", "owner_id", "error_code", "path", "method")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = str(val)
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _TimeWiseHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure root logging for the application."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _TimeWiseHandler):
            logging.root.removeHandler(existing)

    handler = _TimeWiseHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
