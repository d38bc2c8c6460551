"""Error taxonomy for the offer notification relay.

Every failure the relay surfaces to the Lambda runtime is one of the classes
below. None of them is retried; callers branch on ``code`` (or the class)
instead of matching message strings.
"""

from __future__ import annotations

from typing import Optional


class RelayErrorCodes:
    CONFIG_ERROR = "CONFIG_ERROR"
    EMPTY_EVENT = "EMPTY_EVENT"
    EVENT_PARSE_ERROR = "EVENT_PARSE_ERROR"
    FETCH_ERROR = "FETCH_ERROR"
    DECODE_ERROR = "DECODE_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"


class RelayError(Exception):
    """Base class for all relay failures."""

    code: str = ""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class ConfigError(RelayError):
    """Raised when a required setting is missing or invalid."""

    code = RelayErrorCodes.CONFIG_ERROR


class EmptyEventError(RelayError):
    """Raised when the invocation carries no payload."""

    code = RelayErrorCodes.EMPTY_EVENT

    def __init__(self, message: str = "empty event") -> None:
        super().__init__(message)


class EventParseError(RelayError):
    """Raised when the storage event envelope cannot be decoded."""

    code = RelayErrorCodes.EVENT_PARSE_ERROR


class FetchError(RelayError):
    """Raised when the stored object cannot be retrieved.

    ``reason`` holds the object store's error code (``NoSuchKey``,
    ``AccessDenied``...) when one is available.
    """

    code = RelayErrorCodes.FETCH_ERROR

    def __init__(self, message: str, *, reason: Optional[str] = None) -> None:
        super().__init__(message)
        self.reason = reason

    def to_dict(self) -> dict:
        payload = super().to_dict()
        if self.reason:
            payload["reason"] = self.reason
        return payload


class DecodeError(RelayError):
    """Raised when the object body is not a well-formed offer payload."""

    code = RelayErrorCodes.DECODE_ERROR


class ValidationError(RelayError):
    """Raised when an offer breaks a business rule."""

    code = RelayErrorCodes.VALIDATION_ERROR


class TransportError(RelayError):
    """Raised when the mail API call could not be completed."""

    code = RelayErrorCodes.TRANSPORT_ERROR
