# src/request_logger/core/logging/middleware.py
"""
Request ID middleware for FastAPI / Starlette.

Attaches a request identifier to every inbound request so `AppLogger` lines
and stdlib records can be correlated:

1. Use the incoming request-id header (REQUEST_ID_HEADER, `X-Request-ID` by
   default) when present, otherwise generate a UUID4 string.
2. Store it in the request-id contextvar (read by ContextCorrelationProvider and
   RequestIdFilter) and on `request.state.request_id` (read by
   RequestCorrelationProvider).
3. Echo it on the response header.
4. Reset the contextvar once the response is produced.

Register it early so routers and dependencies run inside the scope:
    app.add_middleware(RequestIDMiddleware)
"""

import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from request_logger.config.settings import get_settings

from .filters import set_request_id, reset_request_id


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Starlette / FastAPI middleware that sets a request id for each incoming request.
    """

    def __init__(self, app: ASGIApp, header_name: str | None = None):
        super().__init__(app)
        # falls back to the REQUEST_ID_HEADER setting
        self.header_name = header_name or get_settings().REQUEST_ID_HEADER

    async def dispatch(self, request: Request, call_next):
        rid = request.headers.get(self.header_name) or str(uuid.uuid4())

        request.state.request_id = rid
        token = set_request_id(rid)

        try:
            response = await call_next(request)
            response.headers[self.header_name] = rid
            return response
        finally:
            reset_request_id(token)
