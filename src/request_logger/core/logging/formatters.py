# src/request_logger/core/logging/formatters.py

"""
JSON formatter for the default stdlib sink.

`AppLogger` already produces the human-readable line ("[RequestID: ...] ...");
this formatter wraps it into one JSON object per record so log collectors
(ELK, Fluentd, CloudWatch, ...) can query request_id, level and service
without parsing the message.

Register it through dictConfig (builder.py):

    "json": {"()": JsonFormatter, "env": settings.ENVIRONMENT, "service": settings.SERVICE_NAME}
"""

import json
import logging
from importlib import metadata as importlib_metadata
from typing import Any
from logging import LogRecord

# Attributes every LogRecord carries; anything else came from `extra`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "asctime", "request_id"}


def get_package_version(default: str = "unknown") -> str:
    try:
        return importlib_metadata.version("request-logger")
    except importlib_metadata.PackageNotFoundError:
        return default


PACKAGE_VERSION = get_package_version()


class JsonFormatter(logging.Formatter):
    """
    Structured JSON formatter.

    Construction:
      - env: environment name (e.g., "development" | "production"); optional.
      - service: logical service name to include in logs.
      - datefmt: optional date format passed to logging.Formatter.

    Never raises on odd extras: values that are not JSON-serializable are
    stringified.
    """

    def __init__(self, *, env: str | None = None, service: str = "request-logger", datefmt: str | None = None):
        super().__init__(datefmt=datefmt)
        self.env = env
        self.service = service

    def format(self, record: LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "pathname": record.pathname,
            "lineno": record.lineno,
            "request_id": getattr(record, "request_id", "-"),
            "service": self.service,
            "env": self.env,
            "version": PACKAGE_VERSION,
        }

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            try:
                json.dumps(value)
                log_record[key] = value
            except (TypeError, ValueError):
                log_record[key] = str(value)

        return json.dumps(log_record, ensure_ascii=False, default=str)
