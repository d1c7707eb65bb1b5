# src/request_logger/core/logging/filters.py
"""
Logging filters

Request ID filter, redaction filter and the contextvar helpers behind them.

The request id for the current execution context lives in a
`contextvars.ContextVar`, so it follows asyncio tasks across `await`
boundaries and concurrent requests never see each other's id. The
`RequestIDMiddleware` sets it at the start of each request; the
`ContextCorrelationProvider` and `RequestIdFilter` read it.

How it is intended to be used
------------------------------
1. Declare the filters in the dictConfig (builder.py does this):

     "filters": {
         "request_id": {"()": RequestIdFilter},
         "redact": {"()": RedactFilter},
     },
     "handlers": {
         "console": {"class": "logging.StreamHandler", "filters": ["request_id", "redact"], ...}
     }

2. Set the request id per request (middleware.py), or manually for background jobs:

     token = set_request_id("job-42")
     ...
     reset_request_id(token)
"""

import logging
from logging import LogRecord
import contextvars
from typing import Iterable

from .masking import DEFAULT_MASK_FIELDS, MASK_VALUE

# Default is None to indicate "no request id set".
_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None):
    """
    Set the request id in the current context and return the token to allow reset.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token):
    """
    Reset the contextvar to the previously saved token returned by set_request_id().
    """
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    """
    Retrieve the current context's request id, or None if none has been set.
    """
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Logging filter that guarantees every LogRecord has a `request_id` attribute.

    Precedence: an explicit `extra={"request_id": ...}`, then the contextvar,
    then the sentinel "-". Never drops a record.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    """
    Mask string attributes attached through `extra` whose name is a sensitive field.

    Uses the same field names and sentinel as the object dumper, so a password
    passed as `extra={"password": ...}` reads "****" in every handler.
    """

    def __init__(self, fields: Iterable[str] = DEFAULT_MASK_FIELDS, mask_value: str = MASK_VALUE):
        super().__init__()
        self.fields = frozenset(fields)
        self.mask_value = mask_value

    def filter(self, record: LogRecord) -> bool:
        for key in self.fields.intersection(record.__dict__):
            if isinstance(record.__dict__[key], str):
                record.__dict__[key] = self.mask_value
        return True
