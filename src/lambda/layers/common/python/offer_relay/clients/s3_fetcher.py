"""S3 object retrieval for the relay."""

from __future__ import annotations

from typing import Any, Callable, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..errors import FetchError

ClientFactory = Callable[[str], Any]


def _default_client(region: str) -> Any:
    return boto3.client("s3", region_name=region)


class S3ObjectFetcher:
    """Reads whole objects with a single GetObject call (no retries of its own).

    A client is built per region on each fetch so concurrent invocations never
    share a mutable client.
    """

    def __init__(self, client_factory: Optional[ClientFactory] = None) -> None:
        self._client_factory = client_factory or _default_client

    def fetch(self, bucket: str, key: str, region: str) -> bytes:
        client = self._client_factory(region)
        try:
            response = client.get_object(Bucket=bucket, Key=key)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            raise FetchError(f"failed to get s3://{bucket}/{key}: {e}", reason=code) from e
        except BotoCoreError as e:
            raise FetchError(f"failed to get s3://{bucket}/{key}: {e}") from e

        body = response["Body"]
        try:
            return body.read()
        except (BotoCoreError, OSError) as e:
            raise FetchError(f"failed to read s3://{bucket}/{key}: {e}") from e
        finally:
            body.close()
