from __future__ import annotations

from typing import Any, Dict, List, Optional

from botocore.exceptions import ClientError

from offer_relay.models import DeliveryReceipt, Message


class S3Stub:
    """Minimal GetObject stand-in; raises NoSuchKey for unknown keys."""

    def __init__(self, objects: Optional[Dict[str, bytes]] = None, *, error_code: Optional[str] = None) -> None:
        self.objects = dict(objects or {})
        self.error_code = error_code
        self.get_calls: List[Dict[str, Any]] = []

    def get_object(self, **kwargs: Any) -> Dict[str, Any]:
        self.get_calls.append(kwargs)
        if self.error_code:
            raise ClientError({"Error": {"Code": self.error_code, "Message": self.error_code}}, "GetObject")
        key = kwargs["Key"]
        if key not in self.objects:
            raise ClientError({"Error": {"Code": "NoSuchKey", "Message": "The specified key does not exist."}}, "GetObject")
        return {"Body": _Body(self.objects[key])}


class _Body:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self.closed = False

    def read(self) -> bytes:
        return self._data

    def close(self) -> None:
        self.closed = True


class StubFetcher:
    """ObjectFetcher returning fixed bytes, or raising a prepared error."""

    def __init__(self, data: bytes = b"", *, error: Optional[Exception] = None) -> None:
        self.data = data
        self.error = error
        self.calls: List[Dict[str, str]] = []

    def fetch(self, bucket: str, key: str, region: str) -> bytes:
        self.calls.append({"bucket": bucket, "key": key, "region": region})
        if self.error is not None:
            raise self.error
        return self.data


class RecordingTransport:
    """MailTransport that records messages instead of sending them."""

    def __init__(self, *, status_code: int = 202, body: str = "", error: Optional[Exception] = None) -> None:
        self.status_code = status_code
        self.body = body
        self.error = error
        self.sent: List[Message] = []

    def send(self, message: Message) -> DeliveryReceipt:
        if self.error is not None:
            raise self.error
        self.sent.append(message)
        return DeliveryReceipt(status_code=self.status_code, body=self.body)


class FakeSendGridResponse:
    def __init__(self, status_code: int = 202, body: bytes = b"") -> None:
        self.status_code = status_code
        self.body = body
        self.headers: Dict[str, str] = {}


class FakeSendGridClient:
    """Stands in for SendGridAPIClient; captures the request payload."""

    def __init__(self, api_key: str, *, response: Any = None, error: Optional[Exception] = None) -> None:
        self.api_key = api_key
        self.response = response or FakeSendGridResponse()
        self.error = error
        self.sent: List[Dict[str, Any]] = []

    def send(self, mail: Any) -> Any:
        self.sent.append(mail.get())
        if self.error is not None:
            raise self.error
        return self.response
