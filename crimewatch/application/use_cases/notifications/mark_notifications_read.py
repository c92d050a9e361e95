"""Use cases for flagging notifications as read."""

from sqlalchemy.orm import Session

from crimewatch.domain.entities import Notification, NotificationScope
from crimewatch.infrastructure.repositories import NotificationRepository

NOTIFICATION_NOT_FOUND = "Notificación no encontrada"


def mark_notification_read(session: Session, notification_id: str) -> Notification:
    """Mark a single notification as read; repeated calls are harmless."""

    notification = NotificationRepository(session).mark_as_read(notification_id)
    if notification is None:
        raise ValueError(NOTIFICATION_NOT_FOUND)
    return notification


def mark_all_notifications_read(session: Session, scope: NotificationScope) -> int:
    """Mark every unread notification in ``scope`` as read."""

    return NotificationRepository(session).mark_all_as_read(scope)
