"""Webhook notification configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_var
from .errors import ConfigurationError

DEFAULT_WEBHOOK_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class WebhookConfig:
    """Target endpoint for changed-item notifications."""

    url: str
    token: str | None = None
    timeout_seconds: float = DEFAULT_WEBHOOK_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.url.startswith(("http://", "https://")):
            raise ConfigurationError(f"Webhook URL must be http(s), got {self.url!r}")

    @classmethod
    def from_environment(cls) -> WebhookConfig:
        return cls(
            url=require_env_var("PUBRECON_WEBHOOK_URL"),
            token=optional_env_var("PUBRECON_WEBHOOK_TOKEN"),
        )


def get_webhook_config() -> WebhookConfig | None:
    """Return the webhook config when ``PUBRECON_WEBHOOK_URL`` is set, otherwise ``None``."""

    if optional_env_var("PUBRECON_WEBHOOK_URL") is None:
        return None
    return WebhookConfig.from_environment()
