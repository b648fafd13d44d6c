"""Structured logging tests — JSONFormatter output and setup_logging idempotence."""

import json
import logging
import sys

from registration_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "registration_api.test", logging.INFO, __file__, 1, "POST /register 200", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "registration_api.test"
    assert out["message"] == "POST /register 200"
    assert "timestamp" in out


def test_json_formatter_surfaces_request_fields():
    out = json.loads(JSONFormatter().format(_record(
        method="POST", path="/register", status_code=200, duration_ms=1.5,
    )))
    assert out["method"] == "POST"
    assert out["status_code"] == 200
    assert out["duration_ms"] == 1.5
    assert "error_code" not in out


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = logging.LogRecord(
            "x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info(),
        )
    out = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in out["exception"]


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    original_level = logging.root.level
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == "registration_api"]
    assert len(ours) == 1
    assert len(logging.root.handlers) <= before + 1
    assert logging.root.level == logging.WARNING
    logging.root.removeHandler(ours[0])
    logging.root.setLevel(original_level)
