"""Status polling until a submission reaches a terminal state."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from packages.notary_sdk.api import ApiClient
from packages.notary_sdk.diagnostics import report_diagnostics
from packages.notary_sdk.errors import (
    SubmissionTimeoutError,
    UnexpectedTerminalStatusError,
)
from packages.notary_sdk.models import StatusRecord
from packages.notary_shared.logging import submission_context

STATUS_ACCEPTED = "Accepted"
STATUS_IN_PROGRESS = "In Progress"

TIMEOUT_MESSAGE = "timeout waiting for notarize submission response"


class PollState(str, Enum):
    """Lifecycle of one submission as seen by the poller."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


def classify_status(status: str) -> PollState:
    """Map a service status string onto a poll state.

    Anything other than ``Accepted`` or ``In Progress`` is a failure.
    """
    if status == STATUS_ACCEPTED:
        return PollState.ACCEPTED
    if status == STATUS_IN_PROGRESS:
        return PollState.PENDING
    return PollState.FAILED


def poll_delay(attempt: int, base_delay_seconds: float = 10.0) -> float:
    """Return the wait before poll ``attempt`` (1-based): base + attempt."""
    return base_delay_seconds + attempt


def status_endpoint(submission_id: str) -> str:
    return f"submissions/{submission_id}"


@dataclass(frozen=True, slots=True)
class PollOutcome:
    state: PollState
    status: str
    attempts: int


class StatusPoller:
    """Poll one submission with linearly growing waits under a deadline."""

    def __init__(
        self,
        *,
        api: ApiClient,
        infof: Callable[..., None],
        timeout_seconds: float,
        base_delay_seconds: float = 10.0,
        sleeper: Callable[[float], None] = time.sleep,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._api = api
        self._infof = infof
        self._timeout_seconds = timeout_seconds
        self._base_delay_seconds = base_delay_seconds
        self._sleeper = sleeper
        self._monotonic = monotonic

    def check_status(self, attempt: int, submission_id: str) -> StatusRecord:
        """Query the current status once."""
        self._infof("[%d] Checking status of %s", attempt, submission_id)
        return self._api.request_record(
            "GET",
            status_endpoint(submission_id),
            StatusRecord,
            error_context=f"failed to check status for ID {submission_id}",
        )

    def run(self, submission_id: str) -> PollOutcome:
        """Poll until accepted; raise on failure status or deadline expiry."""
        deadline = self._monotonic() + self._timeout_seconds
        attempt = 0
        with submission_context(submission_id=submission_id):
            while True:
                self._raise_if_expired(deadline, submission_id, attempt)
                attempt += 1
                self._sleeper(poll_delay(attempt, self._base_delay_seconds))
                self._raise_if_expired(deadline, submission_id, attempt - 1)

                status = self.check_status(attempt, submission_id).status
                state = classify_status(status)
                if state is PollState.ACCEPTED:
                    return PollOutcome(state=state, status=status, attempts=attempt)
                if state is PollState.FAILED:
                    log_url = report_diagnostics(self._api, submission_id, self._infof)
                    raise UnexpectedTerminalStatusError(
                        message=f"unexpected status: {status}",
                        submission_id=submission_id,
                        status=status,
                        developer_log_url=log_url,
                    )

    def _raise_if_expired(self, deadline: float, submission_id: str, attempts: int) -> None:
        if self._monotonic() >= deadline:
            raise SubmissionTimeoutError(
                message=TIMEOUT_MESSAGE,
                submission_id=submission_id,
                attempts=attempts,
            )
