"""Typed model of the EventBridge S3 notification envelope using Pydantic v2.

Only ``region``, ``detail.bucket.name`` and ``detail.object.key`` drive the
relay. Everything else is opaque context: kept as-is so it can be logged
alongside a failure, never type-checked.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class ObjectLocator:
    region: str
    bucket: str
    key: str

    @property
    def uri(self) -> str:
        return f"s3://{self.bucket}/{self.key}"


class _EnvelopeModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class BucketRef(_EnvelopeModel):
    name: str = Field(min_length=1)


class ObjectRef(_EnvelopeModel):
    key: str = Field(min_length=1)
    size: Optional[Any] = None
    etag: Optional[Any] = None
    sequencer: Optional[Any] = None


class ObjectEventDetail(_EnvelopeModel):
    version: Optional[Any] = None
    bucket: BucketRef
    object: ObjectRef
    request_id: Optional[Any] = Field(default=None, alias="request-id")
    requester: Optional[Any] = None
    source_ip_address: Optional[Any] = Field(default=None, alias="source-ip-address")
    reason: Optional[Any] = None
    deletion_type: Optional[Any] = Field(default=None, alias="deletion-type")


class ObjectCreatedEvent(_EnvelopeModel):
    version: Optional[Any] = None
    id: Optional[Any] = None
    detail_type: Optional[Any] = Field(default=None, alias="detail-type")
    source: Optional[Any] = None
    account: Optional[Any] = None
    time: Optional[Any] = None
    region: str = Field(min_length=1)
    resources: Optional[Any] = None
    detail: ObjectEventDetail

    @property
    def locator(self) -> ObjectLocator:
        return ObjectLocator(
            region=self.region,
            bucket=self.detail.bucket.name,
            key=self.detail.object.key,
        )
