"""Models subpackage exposed via Common Layer."""

from .events import ObjectCreatedEvent, ObjectLocator
from .message import CompositionMode, DeliveryReceipt, EmailAddress, Message
from .offer import Offer, OfferStatus
from .settings import RelaySettings

__all__ = [
    "ObjectCreatedEvent",
    "ObjectLocator",
    "CompositionMode",
    "DeliveryReceipt",
    "EmailAddress",
    "Message",
    "Offer",
    "OfferStatus",
    "RelaySettings",
]
