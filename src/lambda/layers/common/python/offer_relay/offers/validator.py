"""Business rules applied to a decoded offer.

Rules run in a fixed order and the first failure is raised; callers observe
exactly one message per rejected offer.
"""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

from ..errors import ValidationError
from ..models.offer import Offer

INVALID_BUYER_EMAIL = "invalid buyer email address"
INVALID_SELLER_EMAIL = "invalid seller email address"
NON_POSITIVE_AMOUNT = "offer amount must be greater than zero"


def is_valid_email(address: str) -> bool:
    """Syntax-only check; no DNS or mailbox lookups are made."""
    if not isinstance(address, str) or not address:
        return False
    try:
        validate_email(address, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_offer(offer: Offer) -> None:
    if not is_valid_email(offer.buyer_email):
        raise ValidationError(INVALID_BUYER_EMAIL)
    if not is_valid_email(offer.seller_email):
        raise ValidationError(INVALID_SELLER_EMAIL)
    # NaN compares false, so it is rejected here too
    if not offer.offer_amount > 0:
        raise ValidationError(NON_POSITIVE_AMOUNT)
