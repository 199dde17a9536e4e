"""Log setup for OTMS.

Production writes one JSON object per line to stdout; development and tests
use a plain text format. Report code attaches context through ``extra=``
(``period``, ``user_id``, ...) and those keys end up as JSON fields.
"""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

# extra= keys copied into JSON output when present on the record
CONTEXT_FIELDS = ("period", "user_id", "company_id", "status")

# third-party loggers held at WARNING
QUIET_LOGGERS = ("werkzeug", "mysql.connector", "reportlab")

PLAIN_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "where": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _parse_level(level) -> int:
    if isinstance(level, int):
        return level
    # getLevelName maps a known name to its number and anything else to a "Level x" string
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level="INFO", json_output: bool = True, stream: Optional[TextIO] = None) -> logging.Handler:
    """Replace the root handlers with a single stdout handler and return it."""
    root = logging.getLogger()
    root.setLevel(_parse_level(level))

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter() if json_output else logging.Formatter(PLAIN_FORMAT))
    root.handlers = [handler]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
