"""Deliver changed items to an HTTP webhook."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from pubrecon.adapters.http_resilience import ResilientClient
from pubrecon.config.http_resilience import RateLimit, ResilienceConfig
from pubrecon.config.webhook import WebhookConfig

from .schema import build_notification

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from pubrecon.domain.model import ChangedItem, PublishContext

log = getLogger(__name__)


class NotificationError(RuntimeError):
    """Raised when the webhook rejects or cannot receive a notification."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class WebhookNotifier:
    config: WebhookConfig = field(default_factory=WebhookConfig.from_environment)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self, context: PublishContext, items: Sequence[ChangedItem]) -> None:
        asyncio.run(self._notify_async(context, items))

    def resilience_config(self) -> ResilienceConfig:
        headers = {"Content-Type": "application/json"}
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return ResilienceConfig(
            name="webhook",
            timeout_seconds=self.config.timeout_seconds,
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            default_headers=headers,
        )

    async def _notify_async(self, context: PublishContext, items: Sequence[ChangedItem]) -> None:
        notification = build_notification(context, items)
        body = notification.model_dump(mode="json", by_alias=True, exclude_none=True)

        async with self.client_factory(self.resilience_config()) as client:
            try:
                response = await client.post(self.config.url, json=body)
            except httpx.HTTPError as exc:
                raise NotificationError(f"Webhook delivery failed: {exc}") from exc

        if response.is_error:
            raise NotificationError(
                f"Webhook responded with HTTP {response.status_code}",
                status_code=response.status_code,
            )
        log.info(
            "Delivered %d changed item(s) for job %s to webhook (HTTP %s)",
            len(items),
            context.job_id,
            response.status_code,
        )
