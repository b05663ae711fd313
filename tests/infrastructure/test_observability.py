"""Structured logging: JSON shape, extra fields and idempotent setup."""

import json
import logging

from debugvault.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "debugvault.test", logging.INFO, __file__, 1, "Search completed", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "debugvault.test"
    assert payload["message"] == "Search completed"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(query="auth", total_count=3, unrelated="x"),
    ))
    assert payload["query"] == "auth"
    assert payload["total_count"] == 3
    assert "unrelated" not in payload


def test_setup_logging_is_idempotent():
    before = len(logging.root.handlers)
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    assert first is second
    assert len(logging.root.handlers) <= before + 1
    assert logging.root.level == logging.WARNING
    assert not isinstance(second.formatter, JSONFormatter)
