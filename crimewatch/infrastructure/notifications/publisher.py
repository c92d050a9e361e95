"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from anyio import from_thread

from crimewatch.domain.entities import Notification

from .presence import PresenceRegistry

logger = logging.getLogger(__name__)

NEW_NOTIFICATION_EVENT = "new_notification"
LOAD_NOTIFICATIONS_EVENT = "load_notifications"


class NotificationPublisher:
    """Serialize notifications and schedule their best-effort delivery."""

    def __init__(self, registry: PresenceRegistry) -> None:
        self._registry = registry
        self._pending: set[asyncio.Task[Any]] = set()

    def publish(self, notification: Notification) -> None:
        """Schedule ``notification`` for every connection that should receive it."""

        message = {"type": NEW_NOTIFICATION_EVENT, "data": serialize_notification(notification)}

        if notification.is_for_admins():
            if not self._registry.connected_admins:
                logger.debug("No admin connected, notification %s kept for polling", notification.id)
                return
            self._schedule(self._registry.send_to_admins, message)
            return

        if self._registry.lookup_user(notification.recipient) is None:
            logger.debug(
                "User %s not connected, notification %s kept for polling",
                notification.recipient,
                notification.id,
            )
            return
        self._schedule(self._registry.send_to_user, notification.recipient, message)

    def _schedule(self, send: Callable[..., Awaitable[Any]], *args: Any) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run(send, *args)
            except RuntimeError:
                logger.debug("No event loop reachable; push deferred to next join")
        else:
            task = loop.create_task(send(*args))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return {
        "id": notification.id,
        "recipientType": notification.recipient_type,
        "recipient": notification.recipient,
        "type": notification.type,
        "title": notification.title,
        "message": notification.message,
        "reportId": notification.report_id,
        "read": notification.read,
        "createdAt": notification.created_at.isoformat()
        if notification.created_at
        else None,
    }


__all__ = [
    "NotificationPublisher",
    "serialize_notification",
    "NEW_NOTIFICATION_EVENT",
    "LOAD_NOTIFICATIONS_EVENT",
]
