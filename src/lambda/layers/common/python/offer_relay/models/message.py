"""Outbound notification values."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


class CompositionMode(str, Enum):
    """Which party's address a notification is written around.

    BUYER: sent from the offer's sender, names the buyer in subject and body.
    SELLER: uses the seller's address for sender, subject and body.
    """

    BUYER = "buyer"
    SELLER = "seller"


@dataclass(frozen=True)
class EmailAddress:
    name: str
    email: str


@dataclass(frozen=True)
class Message:
    from_address: EmailAddress
    to_address: EmailAddress
    subject: str
    text_body: str
    html_body: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DeliveryReceipt:
    status_code: int
    body: str = ""
