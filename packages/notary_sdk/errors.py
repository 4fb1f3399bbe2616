"""Error taxonomy for notarization submissions and HTTP error mapping."""

from __future__ import annotations

from dataclasses import dataclass

from packages.notary_shared.http import (
    HttpClientError,
    HttpJsonDecodeError,
    HttpRequestError,
    HttpStatusError,
)


@dataclass(frozen=True)
class NotarySdkError(Exception):
    """Base error type for notary SDK failures."""

    message: str

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self.message


@dataclass(frozen=True)
class ConfigurationError(NotarySdkError):
    """A required option is missing or invalid."""


@dataclass(frozen=True)
class ArtifactError(NotarySdkError):
    """The local artifact could not be opened or read."""

    path: str = ""


@dataclass(frozen=True)
class TransportError(NotarySdkError):
    """Network or IO failure talking to the notary service."""

    method: str = ""
    url: str = ""


@dataclass(frozen=True)
class UnexpectedStatusError(NotarySdkError):
    """The notary service answered with a status other than 200."""

    method: str = ""
    url: str = ""
    status_code: int = 0
    status_text: str = ""
    response_body: str = ""


@dataclass(frozen=True)
class DecodeError(NotarySdkError):
    """A response body was not the JSON shape we expect."""

    method: str = ""
    url: str = ""
    response_body: str = ""


@dataclass(frozen=True)
class UploadError(NotarySdkError):
    """Uploading the artifact to object storage failed."""

    bucket: str = ""
    key: str = ""


@dataclass(frozen=True)
class SubmissionTimeoutError(NotarySdkError):
    """No terminal status arrived before the submission deadline."""

    submission_id: str = ""
    attempts: int = 0


@dataclass(frozen=True)
class UnexpectedTerminalStatusError(NotarySdkError):
    """The submission finished with a status other than ``Accepted``."""

    submission_id: str = ""
    status: str = ""
    developer_log_url: str | None = None


def map_http_error(error: HttpClientError, *, context: str = "") -> NotarySdkError:
    """Map one shared HTTP client error into the SDK taxonomy.

    ``context`` prefixes the message, e.g. ``"failed to check status for ID x"``.
    """
    if isinstance(error, HttpStatusError):
        detail = error.status_text or str(error.status_code)
        return UnexpectedStatusError(
            message=f"{context}: {detail}" if context else detail,
            method=error.method,
            url=error.url,
            status_code=error.status_code,
            status_text=error.status_text,
            response_body=error.response_body,
        )
    if isinstance(error, HttpJsonDecodeError):
        return DecodeError(
            message=f"{context}: {error.message}" if context else error.message,
            method=error.method,
            url=error.url,
            response_body=error.response_body,
        )
    if isinstance(error, HttpRequestError):
        return TransportError(
            message=f"{context}: {error.message}" if context else error.message,
            method=error.method,
            url=error.url,
        )
    return NotarySdkError(message=f"{context}: {error.message}" if context else error.message)
