"""Domain entities exposed by the application."""

from .notification import (
    NOTIFICATION_TYPE_ADMIN_NOTE,
    NOTIFICATION_TYPE_NEW_REPORT,
    NOTIFICATION_TYPE_STATUS_UPDATE,
    NOTIFICATION_TYPES,
    RECIPIENT_TYPE_ADMIN,
    RECIPIENT_TYPE_USER,
    RECIPIENT_TYPES,
    Notification,
    NotificationScope,
)
from .report import (
    REPORT_STATUS_CLOSED,
    REPORT_STATUS_INVESTIGATING,
    REPORT_STATUS_PENDING,
    REPORT_STATUS_RESOLVED,
    REPORT_STATUSES,
    AdminNote,
    Report,
)

__all__ = [
    "Notification",
    "NotificationScope",
    "NOTIFICATION_TYPE_ADMIN_NOTE",
    "NOTIFICATION_TYPE_NEW_REPORT",
    "NOTIFICATION_TYPE_STATUS_UPDATE",
    "NOTIFICATION_TYPES",
    "RECIPIENT_TYPE_ADMIN",
    "RECIPIENT_TYPE_USER",
    "RECIPIENT_TYPES",
    "AdminNote",
    "Report",
    "REPORT_STATUS_PENDING",
    "REPORT_STATUS_INVESTIGATING",
    "REPORT_STATUS_RESOLVED",
    "REPORT_STATUS_CLOSED",
    "REPORT_STATUSES",
]
