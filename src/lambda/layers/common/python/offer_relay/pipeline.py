"""Offer notification pipeline: fetch → decode → validate → compose → send.

The pipeline is linear. A failure at any stage moves it to ``FAILED`` and the
stage's error is re-raised unchanged; a send is attempted at most once.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Optional, Protocol

from .clients.s3_fetcher import S3ObjectFetcher
from .clients.sendgrid_transport import SendGridTransport
from .errors import RelayError
from .models.events import ObjectLocator
from .models.message import CompositionMode, DeliveryReceipt, Message
from .models.offer import Offer
from .models.settings import RelaySettings
from .offers.composer import compose_message
from .offers.decoder import decode_offer
from .offers.validator import validate_offer
from .utils.logger import get_logger


class ObjectFetcher(Protocol):
    def fetch(self, bucket: str, key: str, region: str) -> bytes: ...


class MailTransport(Protocol):
    def send(self, message: Message) -> DeliveryReceipt: ...


class PipelineState(str, Enum):
    START = "START"
    FETCHED = "FETCHED"
    DECODED = "DECODED"
    VALIDATED = "VALIDATED"
    SENT = "SENT"
    FAILED = "FAILED"


class OfferNotificationPipeline:
    """Runs one offer notification for one stored object."""

    def __init__(
        self,
        fetcher: ObjectFetcher,
        transport: MailTransport,
        *,
        mode: CompositionMode = CompositionMode.BUYER,
        logger: Optional[logging.LoggerAdapter] = None,
    ) -> None:
        self.fetcher = fetcher
        self.transport = transport
        self.mode = CompositionMode(mode)
        self.logger = logger or get_logger(__name__)
        self.state = PipelineState.START
        self._completed = PipelineState.START
        self.offer: Optional[Offer] = None
        self.receipt: Optional[DeliveryReceipt] = None

    @classmethod
    def from_settings(
        cls,
        settings: RelaySettings,
        *,
        fetcher: Optional[ObjectFetcher] = None,
        transport_factory: Optional[Callable[[str], MailTransport]] = None,
        logger: Optional[logging.LoggerAdapter] = None,
    ) -> "OfferNotificationPipeline":
        """Build a pipeline after checking settings; raises ConfigError."""
        settings.validate()
        api_key = settings.sendgrid_api_key or ""
        transport = (transport_factory or SendGridTransport)(api_key)
        return cls(
            fetcher or S3ObjectFetcher(),
            transport,
            mode=settings.resolved_mode(),
            logger=logger,
        )

    def _advance(self, state: PipelineState) -> None:
        self.state = state
        self._completed = state
        self.logger.debug(f"Pipeline state: {state.value}")

    def run(self, locator: ObjectLocator) -> DeliveryReceipt:
        if self.state is not PipelineState.START:
            raise RuntimeError(f"pipeline already ran (state={self.state.value})")

        document: Any = None
        try:
            raw = self.fetcher.fetch(locator.bucket, locator.key, locator.region)
            document = raw.decode("utf-8", errors="replace")
            self._advance(PipelineState.FETCHED)
            self.logger.info(f"S3 Document: {document}", extra={"object_uri": locator.uri})

            self.offer = decode_offer(raw)
            self._advance(PipelineState.DECODED)

            validate_offer(self.offer)
            self._advance(PipelineState.VALIDATED)

            message = compose_message(self.offer, self.mode)
            self.receipt = self.transport.send(message)
        except Exception as e:
            self.state = PipelineState.FAILED
            self.logger.error(
                f"Offer notification failed: {e}",
                extra={
                    "error_code": e.code if isinstance(e, RelayError) else type(e).__name__,
                    "failed_after": self._completed.value,
                    "object_uri": locator.uri,
                    "document": document,
                    "offer": self.offer.to_log_dict() if self.offer else None,
                },
            )
            raise

        self._advance(PipelineState.SENT)
        self.logger.info(
            f"Email Response: send responded with {self.receipt.status_code} ({self.receipt.body})",
            extra={"offer_id": self.offer.id, "status_code": self.receipt.status_code},
        )
        return self.receipt
