import logging

from fastapi import Depends, Request

from request_logger.config.settings import get_settings
from request_logger.core.logging import AppLogger, LogSink, RequestCorrelationProvider, StdlibLogSink


def get_log_sink() -> LogSink:
    # Returns the default stdlib-backed sink
    return StdlibLogSink(logging.getLogger("request_logger"))


def get_app_logger(request: Request, sink: LogSink = Depends(get_log_sink)) -> AppLogger:
    # Returns an AppLogger bound to the current request's id
    return AppLogger(
        sink,
        RequestCorrelationProvider(request),
        mask_fields=get_settings().mask_fields,
    )
