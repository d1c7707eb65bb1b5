# src/request_logger/tests/test_core/test_settings.py
import pytest

from request_logger.config.settings import Settings, get_settings, object_logging_enabled
from request_logger.validators.config_validators import is_true_flag, split_csv


def test_defaults():
    settings = Settings()
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FORMAT == "json"
    assert settings.mask_fields == ("password", "Password", "UserKey")
    assert settings.REQUEST_ID_HEADER == "X-Request-ID"


def test_log_level_and_format_are_normalized():
    settings = Settings(LOG_LEVEL="debug", LOG_FORMAT="TEXT")
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "text"


def test_mask_fields_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_MASK_FIELDS", "password, user.token ,,items[0].secret")
    assert get_settings().mask_fields == ("password", "user.token", "items[0].secret")


@pytest.mark.parametrize(
    "raw, expected",
    [(None, False), ("", False), ("false", False), ("1", False), ("true", True), ("True", True)],
)
def test_object_logging_flag(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("LOGS_LOG_OBJ", raising=False)
    else:
        monkeypatch.setenv("LOGS_LOG_OBJ", raw)
    assert object_logging_enabled() is expected


def test_validators():
    assert split_csv(None) == ()
    assert split_csv(" a ,b,") == ("a", "b")
    assert is_true_flag("TRUE")
    assert not is_true_flag("yes")
