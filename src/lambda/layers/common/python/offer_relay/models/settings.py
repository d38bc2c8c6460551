"""Environment settings for the offer notifier Lambda."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from ..errors import ConfigError
from .message import CompositionMode

API_KEY_ENV = "SENDGRID_API_KEY"
COMPOSITION_MODE_ENV = "COMPOSITION_MODE"


@dataclass(frozen=True)
class RelaySettings:
    environment: Optional[str]
    sendgrid_api_key: Optional[str]
    composition_mode: str = CompositionMode.BUYER.value

    @staticmethod
    def load() -> "RelaySettings":
        api_key = (os.environ.get(API_KEY_ENV) or "").strip()
        mode = (os.environ.get(COMPOSITION_MODE_ENV) or CompositionMode.BUYER.value).strip().lower()
        return RelaySettings(
            environment=os.environ.get("ENVIRONMENT"),
            sendgrid_api_key=api_key or None,
            composition_mode=mode,
        )

    def validate(self) -> None:
        """Raise ConfigError unless every required setting is usable."""
        if not self.sendgrid_api_key:
            raise ConfigError(f"{API_KEY_ENV} is not set")
        self.resolved_mode()

    def resolved_mode(self) -> CompositionMode:
        try:
            return CompositionMode(self.composition_mode)
        except ValueError as exc:
            allowed = ", ".join(m.value for m in CompositionMode)
            raise ConfigError(
                f"Unsupported {COMPOSITION_MODE_ENV} '{self.composition_mode}' (expected one of: {allowed})"
            ) from exc
