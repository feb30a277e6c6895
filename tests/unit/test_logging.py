"""Unit tests for structured logging."""

from __future__ import annotations

import json
import logging

import pytest

from focus_coach.core.logging import JsonFormatter, configure_logging


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="focus_coach.focus.service",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Suggestion rejected",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields() -> None:
    line = JsonFormatter().format(_record(validator="actionable", candidate="Think about it."))
    payload = json.loads(line)

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "focus_coach.focus.service"
    assert payload["message"] == "Suggestion rejected"
    assert payload["extra"] == {"validator": "actionable", "candidate": "Think about it."}


def test_json_formatter_omits_empty_extra() -> None:
    payload = json.loads(JsonFormatter().format(_record()))

    assert "extra" not in payload


def test_configure_logging_replaces_handlers() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging("debug")
        configure_logging("info")

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.INFO
        assert logging.getLogger("openai").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_store_log_extras_survive_formatting(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="focus_coach")
    logging.getLogger("focus_coach.state.store").info("Current task set", extra={"user_id": "u"})

    record = caplog.records[-1]
    assert json.loads(JsonFormatter().format(record))["extra"]["user_id"] == "u"


def test_long_string_extras_are_truncated() -> None:
    formatter = JsonFormatter(max_field_chars=10)

    payload = json.loads(formatter.format(_record(raw_response="x" * 25, attempts=3)))

    assert payload["extra"]["raw_response"] == "xxxxxxxxxx... [15 chars truncated]"
    assert payload["extra"]["attempts"] == 3
