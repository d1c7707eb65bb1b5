# src/request_logger/core/logging/app_logger.py
"""
Formatting logger.

`AppLogger` wraps an underlying leveled logger (a `LogSink`) and exposes the
same five operations. For every call it:

  1. asks its correlation provider for the current request id,
  2. formats all arguments into one line (messages.format_message),
  3. forwards that line to the sink's method of the same name.

It never filters by level; that is the sink's job.

Example:
    sink = StdlibLogSink(logging.getLogger("users"))
    app_logger = AppLogger(sink, ContextCorrelationProvider())
    app_logger.error("create failed", exc)
    # -> "[RequestID: 3f2a...] create failed [Error] Message: ..."

Any `logging.Logger` can act as a sink through `StdlibLogSink`, which maps the
five operations onto stdlib levels and registers a VERBOSE level below DEBUG.
"""

import logging
from typing import Any, Iterable, Protocol, runtime_checkable

from .correlation import ContextCorrelationProvider, CorrelationProvider, StaticCorrelationProvider
from .masking import DEFAULT_MASK_FIELDS
from .messages import format_message

VERBOSE = 5
VERBOSE_LEVEL_NAME = "VERBOSE"


def register_verbose_level() -> None:
    """Make `%(levelname)s` print VERBOSE for level 5 records."""
    logging.addLevelName(VERBOSE, VERBOSE_LEVEL_NAME)


@runtime_checkable
class LogSink(Protocol):
    def log(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warn(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def verbose(self, message: str) -> None: ...


class StdlibLogSink:
    """
    Adapt a `logging.Logger` to the five-operation sink interface.

    log -> INFO, error -> ERROR, warn -> WARNING, debug -> DEBUG, verbose -> VERBOSE (5).
    """

    def __init__(self, logger: logging.Logger):
        register_verbose_level()
        self.logger = logger

    # stacklevel=3 points the record at the AppLogger caller, not at this adapter
    def log(self, message: str) -> None:
        self.logger.info(message, stacklevel=3)

    def error(self, message: str) -> None:
        self.logger.error(message, stacklevel=3)

    def warn(self, message: str) -> None:
        self.logger.warning(message, stacklevel=3)

    def debug(self, message: str) -> None:
        self.logger.debug(message, stacklevel=3)

    def verbose(self, message: str) -> None:
        self.logger.log(VERBOSE, message, stacklevel=3)


class AppLogger:
    """
    Request-aware logger that formats, masks and delegates.

    Construction:
      - sink: underlying logger receiving the formatted line.
      - correlation: provider of the request id; defaults to the contextvar provider.
      - mask_fields: sensitive field paths, frozen at construction.
      - log_objects: force structured-argument dumping on/off; None reads
        LOGS_LOG_OBJ from the environment on every call.
    """

    def __init__(
        self,
        sink: LogSink,
        correlation: CorrelationProvider | None = None,
        *,
        mask_fields: Iterable[str] = DEFAULT_MASK_FIELDS,
        log_objects: bool | None = None,
    ):
        self.sink = sink
        self.correlation = correlation or ContextCorrelationProvider()
        self.mask_fields: tuple[str, ...] = tuple(mask_fields)
        self.log_objects = log_objects

    def with_correlation_id(self, correlation_id: str) -> "AppLogger":
        """Return a copy bound to an explicit correlation id."""
        return AppLogger(
            self.sink,
            StaticCorrelationProvider(correlation_id),
            mask_fields=self.mask_fields,
            log_objects=self.log_objects,
        )

    def format(self, *messages: Any) -> str:
        """The line a log call with these arguments would forward to the sink."""
        return format_message(
            messages,
            self.correlation.get_correlation_id(),
            mask_fields=self.mask_fields,
            log_objects=self.log_objects,
        )

    def log(self, *messages: Any) -> None:
        self.sink.log(self.format(*messages))

    def error(self, *messages: Any) -> None:
        self.sink.error(self.format(*messages))

    def warn(self, *messages: Any) -> None:
        self.sink.warn(self.format(*messages))

    def debug(self, *messages: Any) -> None:
        self.sink.debug(self.format(*messages))

    def verbose(self, *messages: Any) -> None:
        self.sink.verbose(self.format(*messages))


__all__ = [
    "VERBOSE",
    "VERBOSE_LEVEL_NAME",
    "register_verbose_level",
    "LogSink",
    "StdlibLogSink",
    "AppLogger",
]
