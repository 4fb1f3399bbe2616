"""Developer log lookup for submissions that did not get accepted."""

from __future__ import annotations

import logging
from collections.abc import Callable

from packages.notary_sdk.api import ApiClient
from packages.notary_sdk.errors import NotarySdkError
from packages.notary_sdk.models import LogRecord

logger = logging.getLogger(__name__)


def logs_endpoint(submission_id: str) -> str:
    return f"submissions/{submission_id}/logs"


def report_diagnostics(
    api: ApiClient,
    submission_id: str,
    infof: Callable[..., None],
) -> str | None:
    """Fetch and log the developer log URL; never raises SDK errors.

    Returns the URL, or None when it could not be fetched.
    """
    infof("Fetching logs for %s", submission_id)
    try:
        record = api.request_record(
            "GET",
            logs_endpoint(submission_id),
            LogRecord,
            error_context=f"failed to fetch logs with ID {submission_id}",
        )
    except NotarySdkError as exc:
        logger.warning("failed to fetch logs: %s", exc)
        return None

    infof("Logs for %s can be found at %s", submission_id, record.developer_log_url)
    return record.developer_log_url
