"""Decode stored offer documents into ``Offer`` records."""

from __future__ import annotations

import json
from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from ..errors import DecodeError
from ..models.offer import Offer


def _describe(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def decode_offer(raw: bytes) -> Offer:
    """Parse a JSON offer document.

    Unknown keys are ignored and absent or ``null`` keys fall back to the
    field defaults; presence is the validator's concern. Wrong value types,
    an unknown status, or bytes that are not a JSON object raise DecodeError.
    """
    try:
        data: Any = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"malformed offer document: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DecodeError(f"offer document must be a JSON object, got {type(data).__name__}")

    fields: Dict[str, Any] = {k: v for k, v in data.items() if v is not None}
    try:
        return Offer.model_validate(fields)
    except PydanticValidationError as exc:
        raise DecodeError(f"invalid offer document: {_describe(exc)}") from exc
