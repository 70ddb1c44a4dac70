"""Structured Logging — one JSON object per record, keyed by visitor session and catalog ids.

Invariants:
    - Every record carries timestamp, level, logger name, and message
    - Catalog lookups tag records with station_id, category_id, or line_code;
      session-scoped routes tag them with session_id
    - Only the keys in _EXTRA_FIELDS are lifted out of the record; other
      extras never reach the log line
    - Arabic names stay readable (no \\u escapes)

Design Decisions:
    - stdlib logging with a small formatter, no logging library
    - setup_logging runs once from the app lifespan; LOG_FORMAT=text gives
      plain lines for local runs
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "session_id", "path", "error_code", "station_id",
    "category_id", "line_code", "limit",
)


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
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
