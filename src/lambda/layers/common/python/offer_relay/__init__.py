"""Offer notification relay shared layer."""

from .errors import (
    ConfigError,
    DecodeError,
    EmptyEventError,
    EventParseError,
    FetchError,
    RelayError,
    RelayErrorCodes,
    TransportError,
    ValidationError,
)

__all__ = [
    "ConfigError",
    "DecodeError",
    "EmptyEventError",
    "EventParseError",
    "FetchError",
    "RelayError",
    "RelayErrorCodes",
    "TransportError",
    "ValidationError",
]
