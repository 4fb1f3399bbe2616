"""Public logging API for notary tooling.

Wraps Python's ``logging`` module with stderr defaults and submission
context propagation.
"""

from .config import (
    JsonFormatter,
    PlainFormatter,
    SubmissionFilter,
    configure_logging,
    get_logger,
)
from .context import SubmissionContext, current_submission, submission_context

__all__ = [
    "JsonFormatter",
    "PlainFormatter",
    "SubmissionContext",
    "SubmissionFilter",
    "configure_logging",
    "current_submission",
    "get_logger",
    "submission_context",
]
