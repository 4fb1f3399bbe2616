"""Object storage upload for submitted artifacts.

Every submission comes with its own short-lived S3 credentials, so an
uploader is built per submission through an ``UploaderFactory``.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

import boto3
from boto3.exceptions import Boto3Error
from botocore.exceptions import BotoCoreError, ClientError

from packages.notary_sdk.errors import UploadError

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-west-2"


@dataclass(frozen=True, slots=True)
class StorageCredentials:
    """Temporary credentials scoped to one submission's upload."""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str = field(repr=False)


class ObjectUploader(Protocol):
    """Upload bytes to ``bucket/key`` and return the object location."""

    def upload(self, bucket: str, key: str, content: bytes, content_type: str) -> str: ...


UploaderFactory = Callable[[StorageCredentials], ObjectUploader]


class S3Uploader:
    """Upload through a boto3 S3 client bound to one set of credentials."""

    def __init__(
        self,
        *,
        credentials: StorageCredentials,
        region: str = DEFAULT_REGION,
        client: Any | None = None,
    ) -> None:
        self._region = region
        self._s3 = client or boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=credentials.access_key_id,
            aws_secret_access_key=credentials.secret_access_key,
            aws_session_token=credentials.session_token,
        )

    def upload(self, bucket: str, key: str, content: bytes, content_type: str) -> str:
        try:
            self._s3.upload_fileobj(
                io.BytesIO(content),
                bucket,
                key,
                ExtraArgs={"ContentType": content_type},
            )
        except (Boto3Error, BotoCoreError, ClientError) as exc:
            raise UploadError(
                message=f"failed to upload s3://{bucket}/{key}: {exc}",
                bucket=bucket,
                key=key,
            ) from exc

        logger.debug("Uploaded %d bytes (bucket=%s key=%s)", len(content), bucket, key)
        return f"https://{bucket}.s3.{self._region}.amazonaws.com/{key}"


def s3_uploader_factory(region: str = DEFAULT_REGION) -> UploaderFactory:
    """Return a factory building ``S3Uploader`` instances in ``region``."""

    def _build(credentials: StorageCredentials) -> ObjectUploader:
        return S3Uploader(credentials=credentials, region=region)

    return _build
