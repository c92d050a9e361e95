"""Use cases for removing notifications."""

from sqlalchemy.orm import Session

from crimewatch.domain.entities import NotificationScope
from crimewatch.infrastructure.repositories import NotificationRepository

from .mark_notifications_read import NOTIFICATION_NOT_FOUND


def delete_notification(session: Session, notification_id: str) -> None:
    """Permanently delete the specified notification."""

    if not NotificationRepository(session).delete(notification_id):
        raise ValueError(NOTIFICATION_NOT_FOUND)


def clear_notifications(session: Session, scope: NotificationScope) -> int:
    """Delete every notification in ``scope`` and return how many were removed."""

    return NotificationRepository(session).delete_all(scope)
