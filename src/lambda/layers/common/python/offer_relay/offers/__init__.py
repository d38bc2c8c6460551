"""Offer decode, validation and composition steps."""

from .composer import compose_message, format_amount
from .decoder import decode_offer
from .validator import validate_offer

__all__ = ["compose_message", "decode_offer", "format_amount", "validate_offer"]
