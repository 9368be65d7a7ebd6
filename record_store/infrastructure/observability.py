"""Structured Logging - JSON formatter and setup for store observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (store, record_id, record_name, error_code) surfaced when present
    - JSON format by default, human-readable text on request
    - Repeated setup_logging calls replace the handler instead of stacking

Design Decisions:
    - JSONFormatter over third-party libs: stdlib logging, full control
    - setup_logging called once at startup via main.configure_logging()
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("store", "record_id", "record_name", "error_code")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _StoreHandler(logging.StreamHandler):
    """Marker subclass so setup_logging can find its own handler."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging and return the installed handler."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _StoreHandler):
            logging.root.removeHandler(existing)
    handler = _StoreHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
