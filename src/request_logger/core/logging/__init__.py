# src/request_logger/core/logging/
# ├─ __init__.py            # public API
# ├─ app_logger.py          # AppLogger (formatting logger), LogSink, StdlibLogSink
# ├─ correlation.py         # correlation providers (contextvar, request, static)
# ├─ messages.py            # argument classification + format_message
# ├─ error_details.py       # format_error (driver + outbound HTTP fields)
# ├─ masking.py             # mask_object, dump_object
# ├─ filters.py             # request-id contextvar helpers, RequestIdFilter, RedactFilter
# ├─ middleware.py          # Starlette middleware setting the request id
# ├─ formatters.py          # JsonFormatter for the stdlib sink
# ├─ handlers.py            # handler factories for dictConfig
# └─ builder.py             # make_dict_config(settings) + setup_logging(settings)


from .app_logger import AppLogger, LogSink, StdlibLogSink, VERBOSE
from .builder import setup_logging, make_dict_config
from .correlation import (
    CorrelationProvider,
    ContextCorrelationProvider,
    RequestCorrelationProvider,
    StaticCorrelationProvider,
)
from .error_details import format_error
from .filters import set_request_id, get_request_id, reset_request_id, RequestIdFilter, RedactFilter
from .masking import DEFAULT_MASK_FIELDS, MASK_VALUE, mask_object, dump_object
from .messages import ArgumentKind, classify_argument, format_message
from .middleware import RequestIDMiddleware

__all__ = [
    "AppLogger", "LogSink", "StdlibLogSink", "VERBOSE",
    "setup_logging", "make_dict_config",
    "CorrelationProvider", "ContextCorrelationProvider", "RequestCorrelationProvider", "StaticCorrelationProvider",
    "format_error",
    "set_request_id", "get_request_id", "reset_request_id", "RequestIdFilter", "RedactFilter",
    "DEFAULT_MASK_FIELDS", "MASK_VALUE", "mask_object", "dump_object",
    "ArgumentKind", "classify_argument", "format_message",
    "RequestIDMiddleware",
]
