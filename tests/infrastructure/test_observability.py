"""Structured Logging - JSON formatter and setup_logging behavior.

Tests:
    - JSONFormatter emits base fields plus known extras only when set
    - Exceptions are serialized under "exception"
    - setup_logging honours level/format and does not stack handlers
"""

import json
import logging
import sys

from record_store.infrastructure.observability import (
    JSONFormatter, setup_logging,
)


def _make_record(msg="hello", exc_info=None, **extra):
    record = logging.LogRecord(
        name="record_store.test", level=logging.INFO, pathname=__file__,
        lineno=1, msg=msg, args=(), exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_make_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "record_store.test"
    assert payload["message"] == "hello"
    assert "timestamp" in payload
    assert "record_id" not in payload


def test_json_formatter_includes_extras():
    record = _make_record(
        store="records", record_id=3, record_name="boot",
        error_code="DUPLICATE_IDENTITY", unrelated="ignored",
    )
    payload = json.loads(JSONFormatter().format(record))
    assert payload["store"] == "records"
    assert payload["record_id"] == 3
    assert payload["record_name"] == "boot"
    assert payload["error_code"] == "DUPLICATE_IDENTITY"
    assert "unrelated" not in payload


def test_json_formatter_serializes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _make_record(exc_info=sys.exc_info())
    payload = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in payload["exception"]


def test_setup_logging_json():
    handler = setup_logging("debug", "json")
    assert handler in logging.root.handlers
    assert isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.DEBUG


def test_setup_logging_text():
    handler = setup_logging("WARNING", "text")
    assert not isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING


def test_setup_logging_unknown_level_falls_back_to_info():
    setup_logging("LOUD", "json")
    assert logging.root.level == logging.INFO


def test_setup_logging_replaces_previous_handler():
    first = setup_logging()
    second = setup_logging()
    assert first not in logging.root.handlers
    assert second in logging.root.handlers
