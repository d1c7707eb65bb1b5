# src/request_logger/tests/test_logging/test_builder_setup.py
import json
import logging
from types import SimpleNamespace

from request_logger.core.logging.app_logger import VERBOSE, AppLogger, StdlibLogSink
from request_logger.core.logging.builder import make_dict_config, setup_logging
from request_logger.core.logging.correlation import StaticCorrelationProvider


def make_settings(tmp_path, **overrides):
    # Duck-typed settings object for tests
    values = dict(
        ENVIRONMENT="testing",
        SERVICE_NAME="svc",
        LOG_FORMAT="json",
        LOG_LEVEL="INFO",
        LOG_TO_STDOUT=False,
        LOG_DIR=tmp_path,
        LOG_MAX_BYTES=100_000,
        LOG_BACKUP_COUNT=1,
        mask_fields=("password",),
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_make_dict_config_with_files(tmp_path):
    cfg = make_dict_config(make_settings(tmp_path))
    assert set(cfg["handlers"]) == {"console", "file", "error_file"}
    assert cfg["handlers"]["file"]["filename"] == str(tmp_path / "app.log")
    assert cfg["handlers"]["error_file"]["level"] == "ERROR"
    assert set(cfg["formatters"]) == {"standard", "json"}
    assert cfg["formatters"]["json"]["service"] == "svc"
    assert cfg["filters"]["redact"]["fields"] == ("password",)


def test_make_dict_config_stdout_only(tmp_path):
    cfg = make_dict_config(make_settings(tmp_path, LOG_TO_STDOUT=True, LOG_FORMAT="text"))
    assert set(cfg["handlers"]) == {"console", "error_console"}
    assert cfg["handlers"]["console"]["formatter"] == "standard"
    assert cfg["loggers"][""]["handlers"] == ["console", "error_console"]


def test_setup_logging_creates_log_dir(tmp_path, restore_root_logger):
    settings = make_settings(tmp_path / "logs")
    assert not settings.LOG_DIR.exists()
    setup_logging(settings)
    assert settings.LOG_DIR.exists()
    assert restore_root_logger.handlers


def test_app_logger_lines_reach_json_file(tmp_path, restore_root_logger):
    settings = make_settings(tmp_path, LOG_LEVEL="VERBOSE")
    setup_logging(settings)

    sink = StdlibLogSink(logging.getLogger("request_logger.test"))
    app_logger = AppLogger(sink, StaticCorrelationProvider("req-file"))
    app_logger.verbose("tracing")
    app_logger.error("failed", ValueError("boom"))
    logging.getLogger("request_logger.test").info("with extra", extra={"password": "secret"})

    for handler in restore_root_logger.handlers:
        handler.flush()

    lines = [json.loads(line) for line in (tmp_path / "app.log").read_text().splitlines()]
    assert lines[0]["level"] == "VERBOSE"
    assert lines[0]["message"] == "[RequestID: req-file] tracing"
    assert lines[1]["message"] == "[RequestID: req-file] failed [Error] Message: boom"
    assert lines[2]["password"] == "****"
    assert logging.getLevelName(VERBOSE) == "VERBOSE"

    errors = (tmp_path / "errors.log").read_text()
    assert "[Error] Message: boom" in errors
