# src/request_logger/core/logging/builder.py
"""
Logging builder: create and apply the dictConfig for the default stdlib sink.

`AppLogger` only formats; the actual output goes through whatever
`logging.Logger` backs its `StdlibLogSink`. This module wires that side:

 - make_dict_config(settings): formatters ("standard", "json"), filters
   ("request_id", "redact"), handlers (console or rotating files) and loggers.
 - setup_logging(settings): registers the VERBOSE level, creates LOG_DIR when
   writing files, applies the config.

Relevant settings: LOG_LEVEL, LOG_FORMAT, LOG_TO_STDOUT, LOG_DIR,
LOG_MAX_BYTES, LOG_BACKUP_COUNT, ENVIRONMENT, SERVICE_NAME, LOG_MASK_FIELDS.
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config

from request_logger.config.settings import Settings

from .app_logger import register_verbose_level
from .filters import RedactFilter, RequestIdFilter
from .formatters import JsonFormatter
from .handlers import (
    get_console_handler,
    get_error_console_handler,
    get_error_file_handler,
    get_file_handler,
)
from .masking import DEFAULT_MASK_FIELDS

STANDARD_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _writes_files(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping using the provided settings.

    Settings-like objects (e.g. SimpleNamespace in tests) work as long as they
    expose the LOG_* attributes; SERVICE_NAME and mask_fields are optional.
    """
    formatters = {
        "standard": {
            "()": logging.Formatter,
            "fmt": STANDARD_FORMAT,
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENVIRONMENT,
            "service": getattr(settings, "SERVICE_NAME", "request-logger"),
        },
    }

    filters = {
        "request_id": {"()": RequestIdFilter},
        "redact": {
            "()": RedactFilter,
            "fields": tuple(getattr(settings, "mask_fields", DEFAULT_MASK_FIELDS)),
        },
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}

    if _writes_files(settings):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers.keys()),
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            "uvicorn.error": {
                "level": settings.LOG_LEVEL,
                "handlers": list(handlers.keys()),
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """
    Initialize the stdlib sink from settings.

    The VERBOSE level is registered before dictConfig runs so LOG_LEVEL=VERBOSE
    resolves to a known level name.
    """
    register_verbose_level()

    if _writes_files(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))

    # Safety net so %(request_id)s never KeyErrors on records that skip handler filters.
    logging.getLogger().addFilter(RequestIdFilter())
