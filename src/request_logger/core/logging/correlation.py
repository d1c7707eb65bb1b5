# src/request_logger/core/logging/correlation.py
"""
Correlation providers.

A correlation provider answers one question: "which request am I logging for?"
The `AppLogger` asks it once per log call and never caches the answer.

| Provider                     | Source of the id                                   |
| ---------------------------- | -------------------------------------------------- |
| ContextCorrelationProvider   | request-id contextvar set by RequestIDMiddleware   |
| RequestCorrelationProvider   | `request.state.request_id` of a Starlette request  |
| StaticCorrelationProvider    | an id handed over explicitly by the caller         |

What happens outside a request scope is up to the source: the contextvar
provider answers "-", the request provider returns whatever the request holds.
"""

from typing import Protocol, runtime_checkable

from starlette.requests import Request

from .filters import get_request_id


@runtime_checkable
class CorrelationProvider(Protocol):
    def get_correlation_id(self) -> str: ...


class ContextCorrelationProvider:
    """Read the id from the current execution context."""

    def get_correlation_id(self) -> str:
        return get_request_id() or "-"


class RequestCorrelationProvider:
    """Read the id the middleware attached to a specific request.

    Returns None when the request never went through RequestIDMiddleware.
    """

    def __init__(self, request: Request):
        self.request = request

    def get_correlation_id(self) -> str | None:
        return getattr(self.request.state, "request_id", None)


class StaticCorrelationProvider:
    """Always return the id given at construction."""

    def __init__(self, correlation_id: str):
        self.correlation_id = correlation_id

    def get_correlation_id(self) -> str:
        return self.correlation_id

    def __repr__(self) -> str:
        return f"StaticCorrelationProvider({self.correlation_id!r})"


__all__ = [
    "CorrelationProvider",
    "ContextCorrelationProvider",
    "RequestCorrelationProvider",
    "StaticCorrelationProvider",
]
