"""Submission context carried by every log line emitted inside a submission.

The notarizer tags its work with the artifact name and, once the service has
answered, the submission id. Both live in one ``ContextVar`` so nested blocks
add to the outer tag and restore it on exit.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Iterator

from . import fields


@dataclass(frozen=True, slots=True)
class SubmissionContext:
    """Correlation fields for the submission currently in flight."""

    name: str | None = None
    submission_id: str | None = None

    def as_fields(self) -> dict[str, str]:
        """Return the bound fields keyed by their log field names."""
        values = {
            fields.SUBMISSION_NAME: self.name,
            fields.SUBMISSION_ID: self.submission_id,
        }
        return {key: value for key, value in values.items() if value}


_SUBMISSION: ContextVar[SubmissionContext] = ContextVar(
    "notary_submission", default=SubmissionContext()
)


def current_submission() -> SubmissionContext:
    """Return the submission context bound to the running code path."""
    return _SUBMISSION.get()


@contextmanager
def submission_context(
    *, name: str | None = None, submission_id: str | None = None
) -> Iterator[SubmissionContext]:
    """Tag log lines in this block with a submission name and/or id.

    Fields left as ``None`` keep whatever an enclosing block bound.
    """
    current = _SUBMISSION.get()
    bound = replace(
        current,
        name=name if name is not None else current.name,
        submission_id=submission_id if submission_id is not None else current.submission_id,
    )
    token = _SUBMISSION.set(bound)
    try:
        yield bound
    finally:
        _SUBMISSION.reset(token)
