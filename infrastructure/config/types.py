"""Typed configuration contracts for environment-specific settings."""

from __future__ import annotations

from typing import Dict, Literal, NotRequired, Required, TypedDict


class EnvironmentConfig(TypedDict, total=False):
    """Strongly-typed environment configuration contract."""

    region: Required[str]
    account_id: NotRequired[str | None]

    lambda_memory: NotRequired[int]
    lambda_timeout: NotRequired[int]

    log_retention_days: NotRequired[int]
    auto_delete_objects: NotRequired[bool]

    offers_key_prefix: NotRequired[str]
    composition_mode: NotRequired[Literal["buyer", "seller"]]
    sendgrid_secret_name: NotRequired[str]

    tags: NotRequired[Dict[str, str]]
