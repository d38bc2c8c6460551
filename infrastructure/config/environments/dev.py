"""Development environment configuration."""

import os

dev_config = {
    "account_id": os.environ.get("CDK_DEFAULT_ACCOUNT"),
    "region": "ap-northeast-2",
    "lambda_memory": 256,
    "lambda_timeout": 30,
    "log_retention_days": 14,
    "auto_delete_objects": True,
    "offers_key_prefix": "offers/",
    "composition_mode": "buyer",
    "sendgrid_secret_name": "offer-relay/dev/sendgrid-api-key",
    "tags": {
        "Environment": "dev",
        "Project": "OfferNotificationRelay",
        "Owner": "CommerceTeam",
    },
}
