"""Public helpers for emitting and managing report notifications."""

from .delete_notifications import clear_notifications, delete_notification
from .dispatcher import NOTE_PREVIEW_LENGTH, NotificationDispatcher, preview_note
from .list_notifications import NotificationPage, list_notifications
from .mark_notifications_read import (
    NOTIFICATION_NOT_FOUND,
    mark_all_notifications_read,
    mark_notification_read,
)

__all__ = [
    "NotificationDispatcher",
    "NOTE_PREVIEW_LENGTH",
    "preview_note",
    "NotificationPage",
    "list_notifications",
    "NOTIFICATION_NOT_FOUND",
    "mark_notification_read",
    "mark_all_notifications_read",
    "delete_notification",
    "clear_notifications",
]
