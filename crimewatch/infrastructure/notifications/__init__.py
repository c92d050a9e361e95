"""Realtime notification helpers for the infrastructure layer."""

from .presence import PresenceRegistry
from .publisher import (
    LOAD_NOTIFICATIONS_EVENT,
    NEW_NOTIFICATION_EVENT,
    NotificationPublisher,
    serialize_notification,
)
from .gateway import ConnectionState, GatewayConnection, NotificationGateway

__all__ = [
    "PresenceRegistry",
    "NotificationPublisher",
    "serialize_notification",
    "NEW_NOTIFICATION_EVENT",
    "LOAD_NOTIFICATIONS_EVENT",
    "ConnectionState",
    "GatewayConnection",
    "NotificationGateway",
]
