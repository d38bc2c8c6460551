import json

import pytest

from offer_relay.envelope import is_empty_event, parse_object_event
from offer_relay.errors import EmptyEventError, EventParseError
from offer_relay.models import ObjectLocator
from tests.fixtures.offer_builders import build_s3_object_created_event


def test_parse_full_envelope() -> None:
    """
    Given: EventBridge S3 Object Created 이벤트
    When: parse_object_event 호출
    Then: 리전/버킷/키로 구성된 locator 반환 및 부가 필드 보존
    """
    event = build_s3_object_created_event(bucket="dev-offers", key="offers/7.json", region="ap-northeast-2")

    envelope = parse_object_event(event)

    assert envelope.locator == ObjectLocator(region="ap-northeast-2", bucket="dev-offers", key="offers/7.json")
    assert envelope.locator.uri == "s3://dev-offers/offers/7.json"
    assert envelope.detail_type == "Object Created"
    assert envelope.source == "aws.s3"
    assert envelope.detail.request_id == "N4N7GDK58NMKJ12R"
    assert envelope.time is not None


def test_minimal_envelope_is_enough() -> None:
    event = {"region": "us-east-1", "detail": {"bucket": {"name": "b"}, "object": {"key": "k"}}}

    assert parse_object_event(event).locator == ObjectLocator(region="us-east-1", bucket="b", key="k")


def test_raw_json_envelope_is_parsed() -> None:
    event = build_s3_object_created_event()

    assert parse_object_event(json.dumps(event)).locator.key == "offers/1.json"


@pytest.mark.parametrize("event", [None, {}, "", b""])
def test_empty_event(event) -> None:
    """
    Given: 페이로드가 없는 호출
    When: parse_object_event 호출
    Then: EmptyEventError 발생
    """
    assert is_empty_event(event)
    with pytest.raises(EmptyEventError, match="empty event"):
        parse_object_event(event)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda e: e.pop("region"),
        lambda e: e.pop("detail"),
        lambda e: e["detail"].pop("bucket"),
        lambda e: e["detail"]["object"].pop("key"),
        lambda e: e["detail"]["object"].__setitem__("key", ""),
        lambda e: e["detail"]["bucket"].__setitem__("name", 123),
    ],
)
def test_incomplete_envelope_raises_parse_error(mutate) -> None:
    """
    Given: 필수 locator 필드가 없거나 잘못된 이벤트
    When: parse_object_event 호출
    Then: EventParseError 발생
    """
    event = build_s3_object_created_event()
    mutate(event)

    with pytest.raises(EventParseError) as exc_info:
        parse_object_event(event)

    assert exc_info.value.code == "EVENT_PARSE_ERROR"


@pytest.mark.parametrize(
    "field, value",
    [
        ("time", "not-a-timestamp"),
        ("id", 12345),
        ("resources", "arn:aws:s3:::dev-offers"),
        ("account", 123456789012),
        ("detail-type", ["Object Created"]),
    ],
)
def test_opaque_envelope_fields_are_not_type_checked(field, value) -> None:
    """
    Given: locator 필드는 정상이고 부가 필드 값이 예상과 다른 이벤트
    When: parse_object_event 호출
    Then: 부가 필드는 그대로 보존되고 locator가 반환됨
    """
    event = build_s3_object_created_event(bucket="dev-offers", key="offers/8.json")
    event[field] = value

    envelope = parse_object_event(event)

    assert envelope.locator == ObjectLocator(region="us-east-1", bucket="dev-offers", key="offers/8.json")
    assert envelope.model_dump(by_alias=True)[field] == value


def test_opaque_object_fields_are_not_type_checked() -> None:
    event = build_s3_object_created_event()
    event["detail"]["object"]["size"] = "1.2 KB"
    event["detail"]["request-id"] = 42

    assert parse_object_event(event).locator.key == "offers/1.json"


@pytest.mark.parametrize("event", ["{not json", [1, 2], 42])
def test_non_object_event_raises_parse_error(event) -> None:
    with pytest.raises(EventParseError):
        parse_object_event(event)
