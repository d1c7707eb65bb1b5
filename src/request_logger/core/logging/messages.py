# src/request_logger/core/logging/messages.py
"""
Message formatter.

Builds the single line forwarded to the underlying logger:

    [RequestID: 3f2a...] user created 42 True

Each argument of a log call is classified into one of a closed set of kinds
(see `ArgumentKind`) and rendered accordingly:

| Kind         | Rendering                                                      |
| ------------ | -------------------------------------------------------------- |
| ERROR_LIKE   | "[Error] " + format_error(exc)                                 |
| TEXT         | the string itself                                              |
| NUMBER       | str(value)                                                     |
| BOOLEAN      | str(value) -> "True" / "False"                                 |
| NULL         | "None"                                                         |
| STRUCTURED   | masked JSON when LOGS_LOG_OBJ=true, otherwise an empty string  |

Structured values are off by default: dumping large payloads on every log call
costs memory and CPU in production.

`format_message` never raises. If anything goes wrong while rendering, the
partial output is discarded and a fixed fallback line is returned instead.
"""

import logging
import numbers
from enum import Enum
from typing import Any, Iterable, Sequence

from request_logger.config.settings import object_logging_enabled
from request_logger.exceptions import FormattingFailure, LoggingError

from .error_details import format_error
from .masking import DEFAULT_MASK_FIELDS, dump_object

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Unable to format error/log message"


class ArgumentKind(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ERROR_LIKE = "error_like"
    STRUCTURED = "structured"


def classify_argument(value: Any) -> ArgumentKind:
    # bool before NUMBER: bool is a subclass of int
    if isinstance(value, BaseException):
        return ArgumentKind.ERROR_LIKE
    if value is None:
        return ArgumentKind.NULL
    if isinstance(value, bool):
        return ArgumentKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return ArgumentKind.NUMBER
    if isinstance(value, str):
        return ArgumentKind.TEXT
    return ArgumentKind.STRUCTURED


def render_argument(value: Any, *, mask_fields: Iterable[str] = DEFAULT_MASK_FIELDS,
                    log_objects: bool | None = None) -> str:
    """
    Render one log argument according to its kind.

    Args:
        value: the argument as passed to the log call.
        mask_fields: sensitive field paths used when dumping objects.
        log_objects: force structured dumping on/off; None reads LOGS_LOG_OBJ now.

    Raises:
        SerializationFailure: a structured value or error payload could not be dumped.
        FormattingFailure: anything else went wrong while rendering.
    """
    kind = classify_argument(value)

    try:
        if kind is ArgumentKind.ERROR_LIKE:
            return f"[Error] {format_error(value, mask_fields=mask_fields)}"

        if kind is ArgumentKind.STRUCTURED:
            enabled = object_logging_enabled() if log_objects is None else log_objects
            return dump_object(value, mask_fields) if enabled else ""

        return str(value)
    except LoggingError:
        raise
    except Exception as exc:
        raise FormattingFailure(f"Unable to render {kind.value} argument") from exc


def _safe_correlation_id(correlation_id: Any) -> str:
    try:
        return str(correlation_id)
    except Exception:
        return "-"


def format_message(messages: Sequence[Any], correlation_id: Any, *,
                   mask_fields: Iterable[str] = DEFAULT_MASK_FIELDS,
                   log_objects: bool | None = None) -> str:
    """
    Format all arguments of a log call into one line prefixed with the correlation id.

    Returns the fallback line instead of raising on any rendering failure.
    """
    try:
        mask_fields = tuple(mask_fields)
        rendered = " ".join(
            render_argument(message, mask_fields=mask_fields, log_objects=log_objects)
            for message in messages
        )
        return f"[RequestID: {correlation_id}] {rendered}"
    except Exception:
        logger.debug("Falling back to default log line", exc_info=True)
        return f"[RequestID: {_safe_correlation_id(correlation_id)}] {FALLBACK_MESSAGE}"


__all__ = [
    "FALLBACK_MESSAGE",
    "ArgumentKind",
    "classify_argument",
    "render_argument",
    "format_message",
]
