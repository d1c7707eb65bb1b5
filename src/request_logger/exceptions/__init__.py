# request_logger/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   └── base.py                    # LoggingError, FormattingFailure, SerializationFailure

from .base import LoggingError, FormattingFailure, SerializationFailure

__all__ = ["LoggingError", "FormattingFailure", "SerializationFailure"]
