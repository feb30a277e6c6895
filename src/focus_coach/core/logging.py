"""Structured logging configuration.

Uses standard library logging with a JSON formatter. Log records from the
suggestion pipeline carry `extra` fields (`user_id`, `validator`,
`candidate`, `raw_response`) so prompt and model regressions can be traced
from the logs alone.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

_RESERVED_LOG_RECORD_ATTRS: frozenset[str] = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"asctime", "message", "taskName"}

# Third-party loggers that are chatty at DEBUG/INFO.
_QUIET_LOGGERS = ("openai", "httpx", "httpcore")

DEFAULT_MAX_FIELD_CHARS = 2000


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    String `extra` values longer than `max_field_chars` are cut so that a
    runaway model response cannot flood the log.
    """

    def __init__(self, max_field_chars: int = DEFAULT_MAX_FIELD_CHARS) -> None:
        super().__init__()
        self.max_field_chars = max_field_chars

    def _clip(self, value: Any) -> Any:
        if isinstance(value, str) and len(value) > self.max_field_chars:
            dropped = len(value) - self.max_field_chars
            return f"{value[: self.max_field_chars]}... [{dropped} chars truncated]"
        return value

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: self._clip(value)
            for key, value in record.__dict__.items()
            if key not in _RESERVED_LOG_RECORD_ATTRS and not key.startswith("_")
        }
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str, *, max_field_chars: int = DEFAULT_MAX_FIELD_CHARS) -> None:
    """Send all logging to stdout as JSON at `level`."""

    root = logging.getLogger()

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonFormatter(max_field_chars=max_field_chars))

    root.addHandler(handler)
    root.setLevel(level.upper())

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(root.level, logging.WARNING))
