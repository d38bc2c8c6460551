from .notification_stack import OfferNotificationStack

__all__ = ["OfferNotificationStack"]
