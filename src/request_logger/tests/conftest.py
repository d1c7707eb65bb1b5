"""
Core pytest configuration for the request logger test suite.

Shared fixtures:
  - sink: a LogSink that records (level, message) pairs instead of writing anywhere
  - clean request-id context and LOGS_LOG_OBJ for every test (autouse)
  - restore_root_logger: undo dictConfig changes made by setup_logging()
"""

from __future__ import annotations

import logging

import pytest

from request_logger.config.settings import OBJECT_LOGGING_ENV_VAR, get_settings
from request_logger.core.logging.filters import set_request_id, reset_request_id


class RecordingSink:
    """LogSink test double: keeps every forwarded line in `records`."""

    def __init__(self):
        self.records: list[tuple[str, str]] = []

    def log(self, message: str) -> None:
        self.records.append(("log", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def warn(self, message: str) -> None:
        self.records.append(("warn", message))

    def debug(self, message: str) -> None:
        self.records.append(("debug", message))

    def verbose(self, message: str) -> None:
        self.records.append(("verbose", message))

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.records]


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture(autouse=True)
def clean_request_context(monkeypatch):
    """
    Every test starts without a request id and with object logging disabled.
    """
    monkeypatch.delenv(OBJECT_LOGGING_ENV_VAR, raising=False)
    token = set_request_id(None)
    get_settings.cache_clear()
    yield
    reset_request_id(token)
    get_settings.cache_clear()


@pytest.fixture()
def object_logging(monkeypatch):
    """Turn on structured-argument dumping through the environment toggle."""
    monkeypatch.setenv(OBJECT_LOGGING_ENV_VAR, "true")


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, filters, level = list(root.handlers), list(root.filters), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.filters = filters
    root.setLevel(level)
