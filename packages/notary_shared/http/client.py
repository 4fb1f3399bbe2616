"""Minimal synchronous HTTP client wrapper over httpx."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from .errors import HttpJsonDecodeError, HttpRequestError, HttpStatusError


def _response_text(response: httpx.Response) -> str:
    """Return response text without raising secondary decode errors."""
    try:
        return response.text
    except Exception:
        return ""


def _status_text(response: httpx.Response) -> str:
    """Return ``"<code> <reason>"`` for one response, e.g. ``"403 Forbidden"``."""
    reason = response.reason_phrase
    return f"{response.status_code} {reason}".strip()


def _status_error(response: httpx.Response) -> HttpStatusError:
    """Build a typed status error from one HTTP response."""
    return HttpStatusError(
        message=f"HTTP {_status_text(response)} for {response.request.method} {response.request.url}",
        method=response.request.method,
        url=str(response.request.url),
        status_code=response.status_code,
        status_text=_status_text(response),
        response_body=_response_text(response),
    )


class HttpClient:
    """Thin synchronous wrapper over ``httpx.Client``."""

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout_seconds: float = 30.0,
        headers: Mapping[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Create a client wrapper, owning the ``httpx.Client`` unless injected."""
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            headers=dict(headers or {}),
            transport=transport,
        )

    def close(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpClient:
        """Enter context manager scope."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context manager scope and close client."""
        self.close()

    def request(
        self,
        method: str,
        url: str,
        *,
        expected_status: int,
        **kwargs: Any,
    ) -> httpx.Response:
        """Issue one request; any status other than ``expected_status`` is an error."""
        try:
            response = self._client.request(method=method, url=url, **kwargs)
        except httpx.RequestError as exc:
            request = _request_of(exc)
            request_url = str(request.url) if request is not None else url
            request_method = request.method if request is not None else method.upper()
            raise HttpRequestError(
                message=f"HTTP request failed for {request_method} {request_url}: {exc}",
                method=request_method,
                url=request_url,
                cause=exc,
            ) from exc

        if response.status_code != expected_status:
            raise _status_error(response)
        return response


def decode_json(response: httpx.Response) -> Any:
    """Decode JSON from one response, raising ``HttpJsonDecodeError`` on failure."""
    try:
        return response.json()
    except ValueError as exc:
        raise HttpJsonDecodeError(
            message=f"Invalid JSON response for {response.request.method} {response.request.url}",
            method=response.request.method,
            url=str(response.request.url),
            status_code=response.status_code,
            response_body=_response_text(response),
            cause=exc,
        ) from exc


def _request_of(exc: httpx.RequestError) -> httpx.Request | None:
    """Return the request attached to one httpx error, if any."""
    try:
        return exc.request
    except RuntimeError:
        return None
