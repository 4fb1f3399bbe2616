"""Authenticated HTTP access to the notary submissions API."""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import ValidationError

from packages.notary_sdk.credential import SignedCredential
from packages.notary_sdk.errors import DecodeError, map_http_error
from packages.notary_sdk.models import WireModel
from packages.notary_shared.http import HttpClient, HttpClientError, decode_json

CONTENT_TYPE = "application/json; charset=UTF-8"

TRecord = TypeVar("TRecord", bound=WireModel)


class ApiClient:
    """Issue bearer-authenticated JSON requests; anything but 200 is an error."""

    def __init__(self, *, http: HttpClient, credential: SignedCredential) -> None:
        self._http = http
        self._credential = credential

    def headers(self) -> dict[str, str]:
        """Return the headers attached to every request."""
        return {
            "Authorization": f"Bearer {self._credential.token}",
            "Content-Type": CONTENT_TYPE,
        }

    def request(
        self,
        method: str,
        endpoint: str,
        body: WireModel | None = None,
        *,
        error_context: str = "",
    ) -> httpx.Response:
        """Send one request; raise ``TransportError`` or ``UnexpectedStatusError``."""
        content = body.to_json().encode("utf-8") if body is not None else None
        try:
            return self._http.request(
                method,
                endpoint,
                expected_status=httpx.codes.OK,
                content=content,
                headers=self.headers(),
            )
        except HttpClientError as exc:
            raise map_http_error(exc, context=error_context) from exc

    def request_record(
        self,
        method: str,
        endpoint: str,
        model: type[TRecord],
        body: WireModel | None = None,
        *,
        error_context: str = "",
    ) -> TRecord:
        """Send one request and decode the 200 body into ``model``."""
        response = self.request(method, endpoint, body, error_context=error_context)
        try:
            payload = decode_json(response)
        except HttpClientError as exc:
            raise map_http_error(exc, context=error_context) from exc
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(
                message=(
                    f"{error_context}: unexpected {model.__name__} payload: {exc}"
                    if error_context
                    else f"unexpected {model.__name__} payload: {exc}"
                ),
                method=method,
                url=str(response.request.url),
                response_body=response.text,
            ) from exc
