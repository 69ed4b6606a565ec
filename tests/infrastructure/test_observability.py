"""Structured Logging — JSON shape, extra fields, handler replacement."""

import json
import logging

from memolab.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "memolab.test", logging.INFO, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "memolab.test"
    assert payload["message"] == "hello"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    record = _record(label="Fibonacci", elapsed_ms=1.25, session_id="s1", unrelated="x")
    payload = json.loads(JSONFormatter().format(record))
    assert payload["label"] == "Fibonacci"
    assert payload["elapsed_ms"] == 1.25
    assert payload["session_id"] == "s1"
    assert "unrelated" not in payload


def test_setup_logging_replaces_its_own_handler():
    previous_level = logging.root.level
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert logging.root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(second)
        logging.root.setLevel(previous_level)
