"""Structured Logging - one JSON object per line, or plain text for local runs.

Invariants:
    - Every JSON line carries timestamp (UTC ISO-8601), level, logger, message
    - Only the whitelisted extras below are copied from the record, and only
      when set; anything else passed via extra= stays out of the output
    - setup_logging returns the handler it installed so callers can detach it

Design Decisions:
    - "entry" rather than "name" for the affected name: LogRecord already
      owns the "name" attribute (the logger name)
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("entry", "names_count", "method", "path", "error_code")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key))
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach a stderr handler to the root logger. fmt: "json" or anything else for text."""
    formatter = JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
