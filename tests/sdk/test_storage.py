"""Unit tests for the boto3-backed S3 uploader."""

from __future__ import annotations

from typing import Any

import pytest
from botocore.exceptions import ClientError

from packages.notary_sdk.errors import UploadError
from packages.notary_sdk.storage import S3Uploader, StorageCredentials

_CREDENTIALS = StorageCredentials(
    access_key_id="AKIA-TEST", secret_access_key="secret", session_token="session"
)


class _FakeS3Client:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[dict[str, Any]] = []
        self._error = error

    def upload_fileobj(self, fileobj, bucket, key, ExtraArgs=None) -> None:  # noqa: N803
        if self._error is not None:
            raise self._error
        self.calls.append(
            {"body": fileobj.read(), "bucket": bucket, "key": key, "extra": ExtraArgs}
        )


def test_s3_uploader_uploads_bytes_and_returns_location() -> None:
    """Uploader should send content with its content type and return the URL."""
    client = _FakeS3Client()
    uploader = S3Uploader(credentials=_CREDENTIALS, region="us-west-2", client=client)

    location = uploader.upload("bucket-a", "prod/x/app.zip", b"payload", "application/zip")

    assert location == "https://bucket-a.s3.us-west-2.amazonaws.com/prod/x/app.zip"
    assert client.calls == [
        {
            "body": b"payload",
            "bucket": "bucket-a",
            "key": "prod/x/app.zip",
            "extra": {"ContentType": "application/zip"},
        }
    ]


def test_s3_uploader_maps_client_errors() -> None:
    """botocore client errors should surface as UploadError."""
    error = ClientError({"Error": {"Code": "AccessDenied", "Message": "no"}}, "PutObject")
    uploader = S3Uploader(credentials=_CREDENTIALS, client=_FakeS3Client(error))

    with pytest.raises(UploadError) as exc_info:
        uploader.upload("bucket-a", "k", b"payload", "application/zip")

    assert exc_info.value.bucket == "bucket-a"
    assert exc_info.value.key == "k"
    assert isinstance(exc_info.value.__cause__, ClientError)


def test_storage_credentials_repr_hides_secrets() -> None:
    """Secret key and session token must not leak through repr."""
    assert "secret" not in repr(_CREDENTIALS)
    assert "session" not in repr(_CREDENTIALS)
