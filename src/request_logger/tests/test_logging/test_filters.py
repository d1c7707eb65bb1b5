# src/request_logger/tests/test_logging/test_filters.py
import logging
from request_logger.core.logging.filters import (
    RedactFilter,
    RequestIdFilter,
    get_request_id,
    reset_request_id,
    set_request_id,
)

def make_record():
    # name, level, pathname, lineno, msg, args, exc_info
    return logging.LogRecord("test", logging.INFO, __file__, 1, "hello %s", ("world",), None)

def test_request_id_filter_defaults_to_dash():
    rec = make_record()
    f = RequestIdFilter()
    assert f.filter(rec) is True
    assert rec.request_id == "-"

def test_request_id_filter_uses_contextvar():
    rec = make_record()
    set_request_id("abc-123")
    RequestIdFilter().filter(rec)
    assert rec.request_id == "abc-123"

def test_request_id_filter_respects_record_extra():
    rec = make_record()
    rec.request_id = "explicit"
    set_request_id("context-id")
    RequestIdFilter().filter(rec)
    assert rec.request_id == "explicit"

def test_reset_request_id_restores_previous_value():
    outer = set_request_id("outer")
    inner = set_request_id("inner")
    assert get_request_id() == "inner"
    reset_request_id(inner)
    assert get_request_id() == "outer"
    reset_request_id(outer)

def test_redact_filter_masks_string_extras():
    rec = make_record()
    rec.password = "secret"
    rec.UserKey = "key-1"
    rec.user = "alice"
    assert RedactFilter().filter(rec) is True
    assert rec.password == "****"
    assert rec.UserKey == "****"
    assert rec.user == "alice"

def test_redact_filter_keeps_non_text_and_custom_fields():
    rec = make_record()
    rec.password = 1234
    rec.token = "t"
    RedactFilter(fields=["token"], mask_value="[x]").filter(rec)
    assert rec.password == 1234
    assert rec.token == "[x]"
