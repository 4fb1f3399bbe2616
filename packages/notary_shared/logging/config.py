"""Logging configuration for notary tooling.

Log lines go to stderr so a command's stdout stays reserved for its result
(plain text or a single JSON document). Lines are either newline-delimited
JSON for collectors or plain text for an operator at a terminal.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

from . import fields
from .context import current_submission

# Chatty client libraries; their INFO lines repeat every request we already log.
_QUIET_LOGGERS = ("httpx", "httpcore", "botocore", "boto3", "s3transfer")


class SubmissionFilter(logging.Filter):
    """Attach the bound submission fields to each record as ``record.submission``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.submission = current_submission().as_fields()
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line, tagged with service, environment and submission."""

    def __init__(self, *, service: str | None = None, environment: str | None = None) -> None:
        super().__init__()
        self._static: dict[str, str] = {}
        if service:
            self._static[fields.SERVICE] = service
        if environment:
            self._static[fields.ENVIRONMENT] = environment

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
            **self._static,
            **getattr(record, "submission", {}),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Terminal formatter: ``LEVEL message`` plus ``key=value`` submission fields."""

    def __init__(self) -> None:
        super().__init__(fmt="%(levelname)s %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        submission = getattr(record, "submission", {})
        if not submission:
            return message
        suffix = " ".join(f"{key}={value}" for key, value in sorted(submission.items()))
        return f"{message} {suffix}"


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = False,
    service: str | None = None,
    environment: str | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install one root handler writing to ``stream`` (stderr by default).

    Existing root handlers are replaced, so calling this twice does not
    duplicate output. Returns the installed handler.
    """
    numeric_level = logging.getLevelName(level.upper())
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(numeric_level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.addFilter(SubmissionFilter())
    if json_output:
        handler.setFormatter(JsonFormatter(service=service, environment=environment))
    else:
        handler.setFormatter(PlainFormatter())
    root.addHandler(handler)

    quiet_level = logging.DEBUG if numeric_level == logging.DEBUG else logging.WARNING
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
