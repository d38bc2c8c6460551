"""SendGrid mail transport."""

from __future__ import annotations

from typing import Any, Callable, Optional

from python_http_client.exceptions import HTTPError
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Email, Mail, To

from ..errors import ConfigError, TransportError
from ..models.message import DeliveryReceipt, Message


def _text(body: Any) -> str:
    if body is None:
        return ""
    if isinstance(body, (bytes, bytearray)):
        return body.decode("utf-8", errors="replace")
    return str(body)


def build_mail(message: Message) -> Mail:
    return Mail(
        from_email=Email(message.from_address.email, message.from_address.name),
        to_emails=To(message.to_address.email, message.to_address.name),
        subject=message.subject,
        plain_text_content=message.text_body,
        html_content=message.html_body,
    )


class SendGridTransport:
    """Single-shot send through the SendGrid v3 API.

    Any HTTP status the API answers with, error range included, comes back as
    a DeliveryReceipt. Only a call that never completes raises TransportError.
    """

    def __init__(self, api_key: str, client_factory: Optional[Callable[[str], Any]] = None) -> None:
        if not api_key:
            raise ConfigError("SendGrid API key is required")
        self._client = (client_factory or SendGridAPIClient)(api_key)

    def send(self, message: Message) -> DeliveryReceipt:
        mail = build_mail(message)
        try:
            response = self._client.send(mail)
        except HTTPError as e:
            return DeliveryReceipt(status_code=int(e.status_code), body=_text(e.body))
        except OSError as e:
            raise TransportError(f"mail send failed: {e}") from e
        return DeliveryReceipt(status_code=int(response.status_code), body=_text(response.body))
