"""External collaborators: object storage and mail delivery."""

from .s3_fetcher import S3ObjectFetcher
from .sendgrid_transport import SendGridTransport

__all__ = ["S3ObjectFetcher", "SendGridTransport"]
