"""Offer record decoded from stored documents.

Field names on the wire follow the producer's JSON (``sender``, ``offerAmount``
...); attributes use snake_case. Every field has an explicit default so that a
document missing a field still decodes and the validator decides whether the
offer is acceptable.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class OfferStatus(str, Enum):
    OFFERED = "OFFERED"
    AGREED = "AGREED"
    DECLINED = "DECLINED"


class Offer(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True, populate_by_name=True)

    id: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    sender_email: str = Field(default="", alias="sender")
    seller_email: str = Field(default="", alias="seller")
    buyer_email: str = Field(default="", alias="buyer")
    offer_amount: float = Field(default=0.0, alias="offerAmount")
    # Carried through untouched; no rule reads the two fields below.
    request_amount: float = Field(default=0.0, alias="requestAmount")
    status: Optional[OfferStatus] = Field(default=None, strict=False)

    @field_validator("status", mode="before")
    @classmethod
    def _blank_status_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and v == "":
            return None
        return v

    def to_log_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
