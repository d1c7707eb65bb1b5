# src/request_logger/core/logging/error_details.py
"""
Error formatter.

Renders an exception as a block of labeled fields:

    Message: duplicate key value violates unique constraint "users_email_key"

    DriveError: UniqueViolationError(...)

    Constraint: users_email_key

    Table: users

Fields are looked up by a short list of attribute aliases. Each alias is tried
on the exception itself, then on its underlying driver error (`driver_error`,
or SQLAlchemy's `DBAPIError.orig`), then on the driver error's `diag` object
(psycopg), before moving to the next alias. That covers asyncpg, psycopg and
SQLAlchemy-wrapped errors as well as app exceptions that carry the attributes
directly.

Errors raised by outbound HTTP calls get six extra fields describing the
request and the response. Two shapes are recognized:
  - httpx errors that carry a request (`httpx.RequestError`, `httpx.HTTPStatusError`)
  - any exception with a truthy `is_network_error` flag and a `config`
    (mapping or object with url / method / headers / data)

Only truthy values are rendered; empty fields are dropped, not printed blank.
"""

import json
import traceback
from collections.abc import Mapping
from typing import Any, Iterable

import httpx

from .masking import DEFAULT_MASK_FIELDS, dump_object

FIELD_SEPARATOR = "\n\n"

# (label, attribute aliases) in rendering order, after Message / Stack / DriveError.
DIAGNOSTIC_FIELDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Query", ("query", "statement")),
    ("Parameters", ("parameters", "params")),
    ("Hint", ("hint", "message_hint")),
    ("Constraint", ("constraint", "constraint_name")),
    ("Detail", ("detail", "message_detail")),
    ("Code", ("sqlstate", "pgcode", "code")),
    ("Table", ("table", "table_name")),
    ("Column", ("column", "column_name")),
    ("Severity", ("severity",)),
    ("Routine", ("routine", "source_function")),
    ("Schema", ("schema", "schema_name")),
)


def _get(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _lookup(sources: Iterable[Any], aliases: tuple[str, ...]) -> Any:
    # alias-major: a driver "sqlstate" wins over a generic "code" on the wrapper
    for name in aliases:
        for source in sources:
            value = getattr(source, name, None)
            if value:
                return value
    return None


def _message(exc: BaseException) -> str:
    return getattr(exc, "message", None) or str(exc)


def _stack(exc: BaseException) -> str | None:
    stack = getattr(exc, "stack", None)
    if stack:
        return stack
    if exc.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip()


def _driver_error(exc: BaseException) -> Any:
    return getattr(exc, "driver_error", None) or getattr(exc, "orig", None)


def response_payload(response: Any) -> Any:
    """Body of a response attached to an error (parsed JSON when possible)."""
    if response is None:
        return None
    if isinstance(response, Mapping):
        return response.get("data")
    data = getattr(response, "data", None)
    if data is not None:
        return data
    if isinstance(response, httpx.Response):
        try:
            return response.json()
        except (ValueError, httpx.StreamError):
            return response.text or None
    return None


def response_status(response: Any) -> Any:
    if response is None:
        return None
    if isinstance(response, httpx.Response):
        return response.status_code
    return _get(response, "status") or _get(response, "status_code")


def _request_body(request: httpx.Request) -> Any:
    try:
        content = request.content
    except httpx.StreamError:
        return None
    if not content:
        return None
    try:
        return json.loads(content)
    except ValueError:
        return content.decode("utf-8", errors="replace")


def network_context(exc: BaseException) -> dict[str, Any] | None:
    """
    Describe the outbound request behind `exc`, or None if it did not come from one.
    """
    if isinstance(exc, httpx.HTTPError):
        try:
            request = exc.request
        except RuntimeError:
            # httpx raises when the error was built without a request
            return None
        return {
            "url": str(request.url),
            "method": request.method,
            "headers": dict(request.headers),
            "data": _request_body(request),
        }

    config = getattr(exc, "config", None)
    if getattr(exc, "is_network_error", False) and config:
        return {key: _get(config, key) for key in ("url", "method", "headers", "data")}

    return None


def format_error(exc: BaseException, *, mask_fields: Iterable[str] = DEFAULT_MASK_FIELDS) -> str:
    """
    Render `exc` as labeled fields separated by blank lines.

    Every value is computed up front; falsy ones are dropped afterwards. Object
    values (headers, request/response bodies, response message) are masked and
    serialized with `dump_object`, so a `SerializationFailure` may propagate to
    the caller.
    """
    mask_fields = tuple(mask_fields)
    driver = _driver_error(exc)
    sources = (exc, driver, getattr(driver, "diag", None))

    response = getattr(exc, "response", None)
    payload = response_payload(response)
    response_message = _get(payload, "message") if isinstance(payload, Mapping) else None

    properties: list[tuple[str, Any]] = [
        ("Message", _message(exc)),
        ("Stack", _stack(exc)),
        ("DriveError", driver),
    ]
    properties.extend((label, _lookup(sources, aliases)) for label, aliases in DIAGNOSTIC_FIELDS)
    properties.append(
        ("Err Response Message", response_message and dump_object(response_message, mask_fields))
    )

    context = network_context(exc)
    if context is not None:
        properties.extend([
            ("Request URL", context["url"] or ""),
            ("Request Method", context["method"] or ""),
            ("Request Headers", dump_object(context["headers"] or {}, mask_fields)),
            ("Request Data", dump_object(context["data"] or {}, mask_fields)),
            ("Response Status", response_status(response) or ""),
            ("Response Data", dump_object(payload or {}, mask_fields)),
        ])

    return FIELD_SEPARATOR.join(f"{label}: {value}" for label, value in properties if value)


__all__ = [
    "DIAGNOSTIC_FIELDS",
    "FIELD_SEPARATOR",
    "format_error",
    "network_context",
    "response_payload",
    "response_status",
]
