"""Logging — one JSON object per line, carrying the people context fields.

Invariants:
    - Every line has timestamp (UTC ISO-8601), level, logger and message
    - person_id, request_name, error_code and the request fields (method, path,
      status_code) appear only when the log call passed them via extra=
    - LOG_FORMAT=json selects JSONFormatter; anything else selects a plain text line

Design Decisions:
    - Configured once from the lifespan; modules only call logging.getLogger(__name__)
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "person_id", "request_name", "error_code", "method", "path", "status_code",
)


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Attach one stream handler to the root logger at the given level."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
