"""Submit one artifact for notarization and wait for the verdict."""

from __future__ import annotations

import time
from collections.abc import Callable
from pathlib import Path

import httpx

from packages.notary_sdk.api import ApiClient
from packages.notary_sdk.config import NotarizerOptions, noop_info_logger
from packages.notary_sdk.credential import SignedCredential, create_signed_credential
from packages.notary_sdk.polling import StatusPoller
from packages.notary_sdk.storage import UploaderFactory, s3_uploader_factory
from packages.notary_sdk.submission import (
    SubmissionResult,
    read_artifact,
    register_submission,
    upload_artifact,
)
from packages.notary_shared.http import HttpClient
from packages.notary_shared.logging import submission_context


class Notarizer:
    """Submit files to the notary service.

    The API token is signed once here and reused for every ``submit`` call
    until it expires (20 minutes by default). Build a new instance to get a
    fresh token. Nothing is mutated after construction, so one instance may
    serve several ``submit`` calls.
    """

    def __init__(
        self,
        options: NotarizerOptions,
        *,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
        uploader_factory: UploaderFactory | None = None,
        sleeper: Callable[[float], None] = time.sleep,
        monotonic: Callable[[], float] = time.monotonic,
        clock: Callable[[], float] = time.time,
    ) -> None:
        options.validate()
        self._options = options
        self._infof = options.info_logger or noop_info_logger
        self._credential = create_signed_credential(
            issuer_id=options.issuer_id,
            key_id=options.key_id,
            signer=options.signer,
            lifetime_seconds=options.token_lifetime_seconds,
            clock=clock,
        )
        self._http = HttpClient(
            base_url=options.base_url,
            timeout_seconds=options.request_timeout_seconds,
            transport=transport,
            client=http_client,
        )
        self._api = ApiClient(http=self._http, credential=self._credential)
        self._uploader_factory = uploader_factory or s3_uploader_factory(
            options.storage_region
        )
        self._sleeper = sleeper
        self._monotonic = monotonic

    @property
    def credential(self) -> SignedCredential:
        return self._credential

    def close(self) -> None:
        """Close the owned HTTP client."""
        self._http.close()

    def __enter__(self) -> Notarizer:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def submit(self, path: str | Path) -> SubmissionResult:
        """Checksum, register, upload and poll one file until accepted."""
        artifact = read_artifact(path)
        self._infof("Submitting %s with checksum %s", artifact.name, artifact.checksum)

        with submission_context(name=artifact.name):
            record = register_submission(self._api, artifact)
            location = upload_artifact(
                record,
                artifact,
                uploader_factory=self._uploader_factory,
                content_type=self._options.content_type,
            )
            self._infof("Successfully uploaded file to S3 location %s", location)

            poller = StatusPoller(
                api=self._api,
                infof=self._infof,
                timeout_seconds=self._options.submission_timeout_seconds,
                base_delay_seconds=self._options.poll_base_delay_seconds,
                sleeper=self._sleeper,
                monotonic=self._monotonic,
            )
            outcome = poller.run(record.id)
            self._infof("Notarization completed!")

        return SubmissionResult(
            submission_id=record.id,
            name=artifact.name,
            checksum=artifact.checksum,
            location=location,
            attempts=outcome.attempts,
        )
