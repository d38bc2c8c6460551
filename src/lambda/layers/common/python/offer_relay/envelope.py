"""Decode the storage notification that triggers the relay."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .errors import EmptyEventError, EventParseError
from .models.events import ObjectCreatedEvent


def is_empty_event(event: Any) -> bool:
    return event is None or (isinstance(event, (dict, list, str, bytes, bytearray)) and len(event) == 0)


def parse_object_event(event: Any) -> ObjectCreatedEvent:
    """Validate an EventBridge S3 event (dict or raw JSON) into a typed envelope."""
    if is_empty_event(event):
        raise EmptyEventError()

    if isinstance(event, (str, bytes, bytearray)):
        try:
            event = json.loads(event)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise EventParseError(f"event is not valid JSON: {exc}") from exc

    if not isinstance(event, dict):
        raise EventParseError(f"event must be a JSON object, got {type(event).__name__}")

    try:
        return ObjectCreatedEvent.model_validate(event)
    except PydanticValidationError as exc:
        missing = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise EventParseError(f"event envelope is invalid: {missing}") from exc
