"""Render a validated offer into an outbound email message."""

from __future__ import annotations

from typing import Tuple

from ..models.message import CompositionMode, EmailAddress, Message
from ..models.offer import Offer

FROM_NAME = "RedSpur"
TO_NAME = "RedSpur Seller"


def format_amount(amount: float) -> str:
    """Fixed-point with six decimals, no currency symbol."""
    return f"{amount:f}"


def _addresses(offer: Offer, mode: CompositionMode) -> Tuple[str, str]:
    """Return (from email, counterparty email named in subject and body)."""
    if mode is CompositionMode.SELLER:
        return offer.seller_email, offer.seller_email
    return offer.sender_email, offer.buyer_email


def compose_message(offer: Offer, mode: CompositionMode = CompositionMode.BUYER) -> Message:
    mode = CompositionMode(mode)
    sender, counterparty = _addresses(offer, mode)
    amount = format_amount(offer.offer_amount)

    return Message(
        from_address=EmailAddress(name=FROM_NAME, email=sender),
        to_address=EmailAddress(name=TO_NAME, email=offer.seller_email),
        subject=f"New offer from {counterparty}",
        text_body=f"Transaction {offer.id}: {counterparty} offers {amount}!",
        html_body=(
            f"Transaction <strong>{offer.id}</strong>: <strong>{counterparty}</strong> "
            f"offers <mark>{amount}</mark>!"
        ),
    )
