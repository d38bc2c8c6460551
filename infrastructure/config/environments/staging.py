"""Staging environment configuration."""

import os

staging_config = {
    "account_id": os.environ.get("CDK_DEFAULT_ACCOUNT"),
    "region": "ap-northeast-2",
    "lambda_memory": 256,
    "lambda_timeout": 30,
    "log_retention_days": 30,
    "auto_delete_objects": False,
    "offers_key_prefix": "offers/",
    "composition_mode": "buyer",
    "sendgrid_secret_name": "offer-relay/staging/sendgrid-api-key",
    "tags": {
        "Environment": "staging",
        "Project": "OfferNotificationRelay",
        "Owner": "CommerceTeam",
    },
}
