"""Request-scoped logging: correlation ids, error details and masked object dumps."""

from .core.logging import (
    AppLogger,
    ContextCorrelationProvider,
    RequestCorrelationProvider,
    RequestIDMiddleware,
    StaticCorrelationProvider,
    StdlibLogSink,
    dump_object,
    format_error,
    format_message,
    mask_object,
    setup_logging,
)
from .exceptions import FormattingFailure, LoggingError, SerializationFailure

__all__ = [
    "AppLogger",
    "ContextCorrelationProvider",
    "RequestCorrelationProvider",
    "RequestIDMiddleware",
    "StaticCorrelationProvider",
    "StdlibLogSink",
    "dump_object",
    "format_error",
    "format_message",
    "mask_object",
    "setup_logging",
    "FormattingFailure",
    "LoggingError",
    "SerializationFailure",
]
