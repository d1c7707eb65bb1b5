"""
Custom exceptions raised by the request logger.
"""


class LoggingError(Exception):
    """
    Base exception for request-logger failures.

    - message: human-friendly description of what could not be rendered
    - error_code: canonical short code (e.g., 'serialization_failure')
    """

    def __init__(self, message: str, *, error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"{self.message} (code: {self.error_code})"
        return self.message


class FormattingFailure(LoggingError):
    """Raised when a log argument cannot be classified or stringified."""

    def __init__(self, message: str = "Unable to format log argument"):
        super().__init__(message, error_code="formatting_failure")


class SerializationFailure(LoggingError):
    """Raised when a (masked) object cannot be serialized to JSON."""

    def __init__(self, message: str = "Unable to serialize object"):
        super().__init__(message, error_code="serialization_failure")


__all__ = [
    "LoggingError",
    "FormattingFailure",
    "SerializationFailure",
]
