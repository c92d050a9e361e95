"""Create report notifications and hand them over for realtime delivery."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from crimewatch.domain.entities import (
    NOTIFICATION_TYPE_ADMIN_NOTE,
    NOTIFICATION_TYPE_NEW_REPORT,
    NOTIFICATION_TYPE_STATUS_UPDATE,
    RECIPIENT_TYPE_ADMIN,
    RECIPIENT_TYPE_USER,
    Notification,
    Report,
)
from crimewatch.infrastructure.notifications import NotificationPublisher, PresenceRegistry
from crimewatch.infrastructure.repositories import NotificationRepository
from crimewatch.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

NOTE_PREVIEW_LENGTH = 100


def preview_note(content: str, *, length: int = NOTE_PREVIEW_LENGTH) -> str:
    """Return the first ``length`` characters of ``content`` with an ellipsis if cut."""

    if len(content) <= length:
        return content
    return f"{content[:length]}..."


class NotificationDispatcher:
    """Single write path for new notifications.

    Every call stores exactly one notification before any push is attempted,
    so an offline recipient still finds it when polling or rejoining. Failures
    are logged and reported as ``None``; the report flow that triggered the
    notification never sees an exception.
    """

    def __init__(
        self,
        session: Session,
        registry: PresenceRegistry,
        *,
        publisher: NotificationPublisher | None = None,
    ) -> None:
        self._session = session
        self._publisher = publisher or NotificationPublisher(registry)

    def notify_admins_new_report(self, report: Report) -> Notification | None:
        """Tell every administrator that ``report`` was submitted."""

        logger.info("Notifying admins about new report %s", report.id)
        return self._persist_and_notify(
            recipient_type=RECIPIENT_TYPE_ADMIN,
            recipient=None,
            notification_type=NOTIFICATION_TYPE_NEW_REPORT,
            title="New Crime Report",
            message=f'New report: "{report.title}" from {report.location}',
            report=report,
        )

    def notify_user_status_update(
        self, user_id: str, report: Report, old_status: str, new_status: str
    ) -> Notification | None:
        """Tell the owner of ``report`` that its status changed."""

        logger.info("Notifying user %s about status update on report %s", user_id, report.id)
        return self._persist_and_notify(
            recipient_type=RECIPIENT_TYPE_USER,
            recipient=user_id,
            notification_type=NOTIFICATION_TYPE_STATUS_UPDATE,
            title="Report Status Updated",
            message=(
                f'Your report "{report.title}" status changed from {old_status} to {new_status}'
            ),
            report=report,
        )

    def notify_user_admin_note(
        self, user_id: str, report: Report, note_content: str
    ) -> Notification | None:
        """Tell the owner of ``report`` that an administrator annotated it."""

        logger.info("Notifying user %s about admin note on report %s", user_id, report.id)
        return self._persist_and_notify(
            recipient_type=RECIPIENT_TYPE_USER,
            recipient=user_id,
            notification_type=NOTIFICATION_TYPE_ADMIN_NOTE,
            title="New Update on Your Report",
            message=(
                f'Admin added a note to your report "{report.title}": '
                f"{preview_note(note_content)}"
            ),
            report=report,
        )

    def _persist_and_notify(
        self,
        *,
        recipient_type: str,
        recipient: str | None,
        notification_type: str,
        title: str,
        message: str,
        report: Report,
    ) -> Notification | None:
        try:
            notification = Notification(
                id=None,
                recipient_type=recipient_type,
                recipient=recipient,
                type=notification_type,
                title=title,
                message=message,
                report_id=report.id,
                read=False,
                created_at=now_in_app_timezone(),
            )
            saved = NotificationRepository(self._session).create(notification)
        except Exception:
            logger.exception(
                "Could not save %s notification for report %s", notification_type, report.id
            )
            self._session.rollback()
            return None

        logger.debug("Saved %s notification %s", notification_type, saved.id)
        try:
            self._publisher.publish(saved)
        except Exception:
            logger.exception("Could not schedule push for notification %s", saved.id)
        return saved


__all__ = ["NotificationDispatcher", "preview_note", "NOTE_PREVIEW_LENGTH"]
