"""Structured JSON logging to a console stream."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from typing import IO, Any, Optional

LOGGER_NAME = "lootdogs"
_DATA_ATTR = "additional_data"


class JsonFormatter(logging.Formatter):
    """Formats a record as one JSON object with timestamp, data and message."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat()
        }
        data = getattr(record, _DATA_ATTR, None)
        if data is not None:
            entry["data"] = data
        entry["message"] = record.getMessage()
        return json.dumps(entry, default=str)


def init_logger(stream: Optional[IO[str]] = None) -> logging.Logger:
    """Send the package logger's records as JSON lines to ``stream`` (stdout by default)."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, JsonFormatter):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


def log_with_data(logger: logging.Logger, level: int, message: str, data: Any) -> None:
    """Log ``message`` with ``data`` attached as the record's structured payload."""
    logger.log(level, message, extra={_DATA_ATTR: data})