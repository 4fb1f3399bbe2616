"""Unit tests for artifact reading, registration and upload."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest
from pydantic import ValidationError

from packages.notary_sdk.errors import ArtifactError, UploadError
from packages.notary_sdk.models import SubmissionRecord
from packages.notary_sdk.submission import read_artifact, upload_artifact
from tests.sdk.fakes import FakeUploader


def _record() -> SubmissionRecord:
    return SubmissionRecord.model_validate(
        {
            "data": {
                "id": "sub-1",
                "type": "newSubmissions",
                "attributes": {
                    "awsAccessKeyId": "AKIA-TEST",
                    "awsSecretAccessKey": "secret",
                    "awsSessionToken": "session",
                    "bucket": "notary-submissions",
                    "object": "prod/sub-1/app.zip",
                },
            }
        }
    )


@pytest.mark.parametrize("data_id", [None, ""])
def test_submission_record_requires_an_id(data_id: str | None) -> None:
    """A record without a usable id cannot address later status requests."""
    payload = _record().model_dump(by_alias=True)
    if data_id is None:
        del payload["data"]["id"]
    else:
        payload["data"]["id"] = data_id

    with pytest.raises(ValidationError):
        SubmissionRecord.model_validate(payload)


def test_read_artifact_checksum_matches_buffered_bytes(artifact_path: Path) -> None:
    """The checksum should be the SHA-256 of the exact bytes buffered for upload."""
    artifact = read_artifact(artifact_path)

    on_disk = artifact_path.read_bytes()
    assert artifact.content == on_disk
    assert artifact.checksum == hashlib.sha256(on_disk).hexdigest()
    assert artifact.checksum == hashlib.sha256(artifact.content).hexdigest()
    assert artifact.checksum == artifact.checksum.lower()
    assert artifact.name == "app.zip"


def test_read_artifact_handles_empty_files(tmp_path: Path) -> None:
    """Empty files still produce the well-known empty digest."""
    path = tmp_path / "empty.zip"
    path.write_bytes(b"")

    artifact = read_artifact(path)

    assert artifact.content == b""
    assert artifact.checksum == hashlib.sha256(b"").hexdigest()


def test_read_artifact_reports_missing_file(tmp_path: Path) -> None:
    """Missing files should raise ArtifactError chained to the OSError."""
    with pytest.raises(ArtifactError) as exc_info:
        read_artifact(tmp_path / "missing.zip")

    assert exc_info.value.path.endswith("missing.zip")
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_upload_artifact_uses_record_credentials_and_location(artifact_path: Path) -> None:
    """Upload should target the record's bucket/object with its credentials."""
    uploader = FakeUploader()
    artifact = read_artifact(artifact_path)

    location = upload_artifact(
        _record(), artifact, uploader_factory=uploader, content_type="application/zip"
    )

    upload = uploader.uploads[0]
    assert location == "https://notary-submissions.s3.us-west-2.amazonaws.com/prod/sub-1/app.zip"
    assert upload.bucket == "notary-submissions"
    assert upload.key == "prod/sub-1/app.zip"
    assert upload.content == artifact.content
    assert upload.credentials.access_key_id == "AKIA-TEST"
    assert upload.credentials.session_token == "session"


def test_upload_artifact_wraps_collaborator_failures(artifact_path: Path) -> None:
    """Arbitrary uploader exceptions should surface as UploadError."""
    uploader = FakeUploader(error=RuntimeError("socket closed"))

    with pytest.raises(UploadError) as exc_info:
        upload_artifact(
            _record(),
            read_artifact(artifact_path),
            uploader_factory=uploader,
            content_type="application/zip",
        )

    assert exc_info.value.bucket == "notary-submissions"
    assert "socket closed" in str(exc_info.value)
