"""Offer notification stack: S3 offer documents → EventBridge → notifier Lambda."""

from __future__ import annotations

from typing import Dict

from aws_cdk import (
    CfnOutput,
    Duration,
    RemovalPolicy,
    SecretValue,
    Stack,
    aws_events as events,
    aws_events_targets as targets,
    aws_lambda as lambda_,
    aws_logs as logs,
    aws_s3 as s3,
)
from aws_cdk.aws_lambda_python_alpha import BundlingOptions, PythonFunction, PythonLayerVersion
from constructs import Construct


class OfferNotificationStack(Stack):
    """Provision the offers bucket, notifier Lambda and the EventBridge rule between them."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        config: Dict,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = environment
        self.config = config
        secret_name = str(self.config.get("sendgrid_secret_name", "")).strip()
        if not secret_name:
            raise ValueError("sendgrid_secret_name is required")
        self.sendgrid_secret_name = secret_name

        mode = str(self.config.get("composition_mode", "buyer")).strip().lower()
        if mode not in ("buyer", "seller"):
            raise ValueError(f"Unsupported composition_mode: {mode}")
        self.composition_mode = mode

        self.offers_bucket = self._create_offers_bucket()
        self.common_layer = self._create_common_layer()
        self.notifier_function = self._create_notifier_function()
        self.rule = self._create_object_created_rule()
        self._create_outputs()

    def _create_offers_bucket(self) -> s3.Bucket:
        removal_policy = RemovalPolicy.RETAIN if self.env_name == "prod" else RemovalPolicy.DESTROY
        return s3.Bucket(
            self,
            "OffersBucket",
            bucket_name=f"{self.env_name}-offers-{self.account}",
            encryption=s3.BucketEncryption.S3_MANAGED,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            enforce_ssl=True,
            event_bridge_enabled=True,
            removal_policy=removal_policy,
            auto_delete_objects=bool(self.config.get("auto_delete_objects", False)) and self.env_name != "prod",
        )

    def _create_common_layer(self) -> lambda_.LayerVersion:
        """Common layer: python/offer_relay/... plus its pinned requirements."""
        return PythonLayerVersion(
            self,
            "CommonLayer",
            entry="src/lambda/layers/common",
            layer_version_name=f"{self.env_name}-offer-relay-common",
            description="Offer relay models, rules and clients",
            compatible_runtimes=[lambda_.Runtime.PYTHON_3_12],
            bundling=BundlingOptions(
                command=[
                    "bash",
                    "-c",
                    "set -euxo pipefail; "
                    "mkdir -p /asset-output/python; "
                    "cp -R /asset-input/python/. /asset-output/python/; "
                    "if [ -f requirements.txt ]; then pip install -q -r requirements.txt -t /asset-output/python; fi",
                ],
                asset_excludes=["tests", "__pycache__", "*.pyc"],
            ),
        )

    def _create_notifier_function(self) -> lambda_.IFunction:
        function = PythonFunction(
            self,
            "OfferNotifier",
            function_name=f"{self.env_name}-offer-notifier",
            runtime=lambda_.Runtime.PYTHON_3_12,
            entry="src/lambda/functions/offer_notifier",
            index="handler.py",
            handler="main",
            memory_size=int(self.config.get("lambda_memory", 256)),
            timeout=Duration.seconds(int(self.config.get("lambda_timeout", 30))),
            log_retention=self._log_retention(),
            layers=[self.common_layer],
            # EventBridge invokes asynchronously; failures are surfaced, not retried
            retry_attempts=0,
            # Rendered as a {{resolve:secretsmanager:...}} reference, resolved at deploy time
            environment={
                "ENVIRONMENT": self.env_name,
                "SENDGRID_API_KEY": SecretValue.secrets_manager(self.sendgrid_secret_name).unsafe_unwrap(),
                "COMPOSITION_MODE": self.composition_mode,
            },
        )
        self.offers_bucket.grant_read(function)
        return function

    def _create_object_created_rule(self) -> events.Rule:
        prefix = str(self.config.get("offers_key_prefix", ""))
        object_filter: Dict = {"key": [{"prefix": prefix}]} if prefix else {}
        detail: Dict = {"bucket": {"name": [self.offers_bucket.bucket_name]}}
        if object_filter:
            detail["object"] = object_filter

        rule = events.Rule(
            self,
            "OfferObjectCreatedRule",
            rule_name=f"{self.env_name}-offer-object-created",
            event_pattern=events.EventPattern(
                source=["aws.s3"],
                detail_type=["Object Created"],
                detail=detail,
            ),
        )
        rule.add_target(
            targets.LambdaFunction(
                self.notifier_function,
                event=events.RuleTargetInput.from_event_path("$"),
                retry_attempts=0,
            )
        )
        return rule

    def _create_outputs(self) -> None:
        CfnOutput(
            self,
            "OffersBucketName",
            value=self.offers_bucket.bucket_name,
            description="Bucket whose new objects trigger offer notifications",
        )
        CfnOutput(
            self,
            "OfferNotifierFunctionName",
            value=self.notifier_function.function_name,
            description="Offer notifier Lambda function",
        )

    def _log_retention(self) -> logs.RetentionDays:
        retention_map = {
            1: logs.RetentionDays.ONE_DAY,
            3: logs.RetentionDays.THREE_DAYS,
            5: logs.RetentionDays.FIVE_DAYS,
            7: logs.RetentionDays.ONE_WEEK,
            14: logs.RetentionDays.TWO_WEEKS,
            30: logs.RetentionDays.ONE_MONTH,
            90: logs.RetentionDays.THREE_MONTHS,
        }
        return retention_map.get(self.config.get("log_retention_days", 14), logs.RetentionDays.TWO_WEEKS)
