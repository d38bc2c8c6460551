#!/usr/bin/env python3
"""
Offer Notification Relay CDK App
Deploys the S3 → EventBridge → Lambda relay that emails sellers about new offers.
"""

import aws_cdk as cdk

from infrastructure.config.environments import get_environment_config
from infrastructure.pipelines.offer_notification import OfferNotificationStack

app = cdk.App()

# Get environment configuration
environment = app.node.try_get_context("environment") or "dev"
config = get_environment_config(environment)

# Secrets Manager secret holding the SendGrid key: cdk deploy -c sendgrid_secret_name=...
secret_name = app.node.try_get_context("sendgrid_secret_name")
if secret_name:
    config["sendgrid_secret_name"] = secret_name

cdk_env = cdk.Environment(account=config.get("account_id"), region=config.get("region", "ap-northeast-2"))

notification_stack = OfferNotificationStack(
    app,
    f"OfferRelay-{environment}-Notification",
    environment=environment,
    config=config,
    env=cdk_env,
    description=f"Offer notification relay ({environment})",
)

for key, value in config.get("tags", {}).items():
    cdk.Tags.of(app).add(key, value)
cdk.Tags.of(app).add("ManagedBy", "CDK")
cdk.Tags.of(notification_stack).add("PipelineType", "Notification")

app.synth()
