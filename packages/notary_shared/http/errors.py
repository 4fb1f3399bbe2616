"""Typed errors for the shared HTTP client wrapper."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HttpError(Exception):
    """Base error type for shared HTTP helper failures."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(frozen=True)
class HttpClientError(HttpError):
    """Base error for outbound HTTP call failures."""

    method: str
    url: str


@dataclass(frozen=True)
class HttpRequestError(HttpClientError):
    """Transport-level failure before any response was received."""

    cause: Exception | None = None


@dataclass(frozen=True)
class HttpStatusError(HttpClientError):
    """Response arrived with a status code other than the expected one."""

    status_code: int = 0
    status_text: str = ""
    response_body: str = ""


@dataclass(frozen=True)
class HttpJsonDecodeError(HttpClientError):
    """Response body could not be decoded as JSON."""

    status_code: int = 0
    response_body: str = ""
    cause: Exception | None = None
