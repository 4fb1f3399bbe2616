"""Wire records exchanged with the notary service.

Responses follow a JSON:API style envelope::

    {"data": {"id": "...", "type": "...", "attributes": {...}}, "meta": {}}

Field names are camelCase on the wire and snake_case in Python.
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model with camelCase aliases that ignores unknown keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def to_json(self) -> str:
        """Serialize to a camelCase JSON string."""
        return self.model_dump_json(by_alias=True)


class SubmissionRequest(WireModel):
    """Body of ``POST /submissions``."""

    sha256: str
    submission_name: str


class SubmissionAttributes(WireModel):
    """Short-lived storage credentials and target for one upload."""

    aws_access_key_id: str
    aws_secret_access_key: str
    aws_session_token: str
    bucket: str
    object: str


class StatusAttributes(WireModel):
    status: str
    name: str = ""
    created_date: datetime | None = None


class LogAttributes(WireModel):
    developer_log_url: str


TAttributes = TypeVar("TAttributes", bound=WireModel)


class ResourceData(WireModel, Generic[TAttributes]):
    id: str = ""
    type: str = ""
    attributes: TAttributes


class Envelope(WireModel, Generic[TAttributes]):
    data: ResourceData[TAttributes]


class SubmissionData(ResourceData[SubmissionAttributes]):
    # Every later request is addressed by this id.
    id: str = Field(min_length=1)


class SubmissionRecord(Envelope[SubmissionAttributes]):
    """Response to ``POST /submissions``."""

    data: SubmissionData

    @property
    def id(self) -> str:
        return self.data.id


class StatusRecord(Envelope[StatusAttributes]):
    """Response to ``GET /submissions/{id}``."""

    @property
    def status(self) -> str:
        return self.data.attributes.status


class LogRecord(Envelope[LogAttributes]):
    """Response to ``GET /submissions/{id}/logs``."""

    @property
    def developer_log_url(self) -> str:
        return self.data.attributes.developer_log_url
