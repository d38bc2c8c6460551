"""Production environment configuration."""

import os

prod_config = {
    "account_id": os.environ.get("CDK_DEFAULT_ACCOUNT"),
    "region": "ap-northeast-2",
    "lambda_memory": 512,
    "lambda_timeout": 60,
    "log_retention_days": 90,
    "auto_delete_objects": False,
    "offers_key_prefix": "offers/",
    "composition_mode": "buyer",
    "sendgrid_secret_name": "offer-relay/prod/sendgrid-api-key",
    "tags": {
        "Environment": "prod",
        "Project": "OfferNotificationRelay",
        "Owner": "CommerceTeam",
    },
}
