"""Webhook notification adapter."""

from __future__ import annotations

from .notifier import NotificationError, WebhookNotifier
from .schema import ChangedItemModel, ChangedItemsNotification, build_notification

__all__ = [
    "ChangedItemModel",
    "ChangedItemsNotification",
    "NotificationError",
    "WebhookNotifier",
    "build_notification",
]
