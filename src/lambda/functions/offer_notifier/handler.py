"""Offer notifier Lambda: S3 Object Created event → offer email to the seller."""

import json
from typing import Any, Dict

from offer_relay.clients import S3ObjectFetcher, SendGridTransport
from offer_relay.envelope import parse_object_event
from offer_relay.errors import RelayError
from offer_relay.models import RelaySettings
from offer_relay.pipeline import OfferNotificationPipeline
from offer_relay.utils.logger import extract_correlation_id, get_logger

logger = get_logger(__name__)


def main(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Main handler for the offer notifier Lambda function.

    Expected event structure (EventBridge S3 notification):
    {
        "id": "string",
        "detail-type": "Object Created",
        "source": "aws.s3",
        "region": "string",
        "detail": {
            "bucket": {"name": "string"},
            "object": {"key": "string"}
        }
    }

    Args:
        event: EventBridge event pointing at a stored offer document
        context: Lambda context

    Returns:
        Summary of the delivered notification

    Raises:
        RelayError: any stage failure, unchanged, so the invocation fails
    """
    log = logger
    corr_id = extract_correlation_id(event)
    if corr_id:
        log = get_logger(__name__, correlation_id=corr_id)

    try:
        settings = RelaySettings.load()
        pipeline = OfferNotificationPipeline.from_settings(
            settings,
            fetcher=S3ObjectFetcher(),
            transport_factory=SendGridTransport,
            logger=log,
        )

        log.info(f"Event: {json.dumps(event, default=str)}")

        envelope = parse_object_event(event)
        locator = envelope.locator
        log.info(
            f"Processing offer document {locator.uri}",
            extra={"region": locator.region, "event_source": envelope.source},
        )

        receipt = pipeline.run(locator)
    except RelayError as e:
        log.error(
            f"Offer notification aborted: {e}",
            extra={"error_code": e.code, "event": json.dumps(event, default=str)},
        )
        raise

    return {
        "status": pipeline.state.value,
        "offer_id": pipeline.offer.id if pipeline.offer else None,
        "object": locator.uri,
        "delivery": {"statusCode": receipt.status_code, "body": receipt.body},
    }
