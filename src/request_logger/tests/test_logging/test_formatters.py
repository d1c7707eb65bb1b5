# src/request_logger/tests/test_logging/test_formatters.py
import logging
import json
from request_logger.core.logging.formatters import JsonFormatter

def make_record():
    return logging.LogRecord("request_logger", logging.INFO, __file__, 10, "[RequestID: %s] hello", ("req-1",), None)

def test_json_formatter_basic_fields():
    rec = make_record()
    rec.custom = "value"
    rec.request_id = "req-1"
    fmt = JsonFormatter(env="testing", service="svc")
    data = json.loads(fmt.format(rec))
    assert data["message"] == "[RequestID: req-1] hello"
    assert data["level"] == "INFO"
    assert data["logger"] == "request_logger"
    assert data["service"] == "svc"
    assert data["env"] == "testing"
    assert data["request_id"] == "req-1"
    assert data["custom"] == "value"
    assert "timestamp" in data
    assert "version" in data
    # standard LogRecord attributes are not repeated as extras
    assert "msg" not in data
    assert "args" not in data

def test_json_formatter_non_serializable_extra():
    rec = make_record()
    class X:
        def __repr__(self):
            return "<X>"
    rec.obj = X()
    data = json.loads(JsonFormatter(env="dev", service="svc").format(rec))
    assert data["obj"] == "<X>"

def test_json_formatter_defaults_request_id_and_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        import sys
        rec = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
    data = json.loads(JsonFormatter().format(rec))
    assert data["request_id"] == "-"
    assert "ValueError: bad" in data["exc_info"]
