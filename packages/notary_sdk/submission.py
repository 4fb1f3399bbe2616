"""Artifact reading and the register-then-upload half of a submission."""

from __future__ import annotations

import hashlib
import io
from dataclasses import dataclass, field
from pathlib import Path

from packages.notary_sdk.api import ApiClient
from packages.notary_sdk.errors import ArtifactError, UploadError
from packages.notary_sdk.models import SubmissionRecord, SubmissionRequest
from packages.notary_sdk.storage import StorageCredentials, UploaderFactory

SUBMISSIONS_ENDPOINT = "submissions"

_CHUNK_BYTES = 1024 * 1024


@dataclass(frozen=True, slots=True)
class Artifact:
    """File contents read once, with the checksum of exactly those bytes."""

    name: str
    checksum: str
    content: bytes = field(repr=False)


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    """Outcome of one accepted notarization."""

    submission_id: str
    name: str
    checksum: str
    location: str
    attempts: int


def read_artifact(path: str | Path) -> Artifact:
    """Read ``path`` in one pass, feeding both SHA-256 and the upload buffer."""
    resolved = Path(path)
    digest = hashlib.sha256()
    buffer = io.BytesIO()
    try:
        with resolved.open("rb") as handle:
            for chunk in iter(lambda: handle.read(_CHUNK_BYTES), b""):
                digest.update(chunk)
                buffer.write(chunk)
    except OSError as exc:
        raise ArtifactError(
            message=f"cannot read {resolved}: {exc.strerror or exc}",
            path=str(resolved),
        ) from exc

    return Artifact(
        name=resolved.name,
        checksum=digest.hexdigest(),
        content=buffer.getvalue(),
    )


def register_submission(api: ApiClient, artifact: Artifact) -> SubmissionRecord:
    """Create the submission and receive its upload credentials."""
    request = SubmissionRequest(sha256=artifact.checksum, submission_name=artifact.name)
    return api.request_record("POST", SUBMISSIONS_ENDPOINT, SubmissionRecord, request)


def upload_artifact(
    record: SubmissionRecord,
    artifact: Artifact,
    *,
    uploader_factory: UploaderFactory,
    content_type: str,
) -> str:
    """Upload the buffered artifact to the storage location in ``record``."""
    attrs = record.data.attributes
    uploader = uploader_factory(
        StorageCredentials(
            access_key_id=attrs.aws_access_key_id,
            secret_access_key=attrs.aws_secret_access_key,
            session_token=attrs.aws_session_token,
        )
    )
    try:
        return uploader.upload(attrs.bucket, attrs.object, artifact.content, content_type)
    except UploadError:
        raise
    except Exception as exc:
        raise UploadError(
            message=f"failed to upload s3://{attrs.bucket}/{attrs.object}: {exc}",
            bucket=attrs.bucket,
            key=attrs.object,
        ) from exc
