"""Domain entity representing a report notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

RECIPIENT_TYPE_USER = "user"
RECIPIENT_TYPE_ADMIN = "admin"
RECIPIENT_TYPES = (RECIPIENT_TYPE_USER, RECIPIENT_TYPE_ADMIN)

NOTIFICATION_TYPE_NEW_REPORT = "new_report"
NOTIFICATION_TYPE_STATUS_UPDATE = "status_update"
NOTIFICATION_TYPE_ADMIN_NOTE = "admin_note"
NOTIFICATION_TYPES = (
    NOTIFICATION_TYPE_NEW_REPORT,
    NOTIFICATION_TYPE_STATUS_UPDATE,
    NOTIFICATION_TYPE_ADMIN_NOTE,
)


@dataclass
class Notification:
    """Message addressed to one user or to the whole class of administrators.

    Admin notifications never carry an individual ``recipient``; user
    notifications always do. Only ``read`` changes after creation.
    """

    id: str | None
    recipient_type: str
    recipient: str | None
    type: str
    title: str
    message: str
    report_id: str
    read: bool = False
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.recipient_type not in RECIPIENT_TYPES:
            raise ValueError(f"Unknown recipient type '{self.recipient_type}'")
        if self.type not in NOTIFICATION_TYPES:
            raise ValueError(f"Unknown notification type '{self.type}'")
        if self.recipient_type == RECIPIENT_TYPE_USER and not self.recipient:
            raise ValueError("User notifications require a recipient")
        if self.recipient_type == RECIPIENT_TYPE_ADMIN and self.recipient is not None:
            raise ValueError("Admin notifications cannot target an individual recipient")
        if not self.report_id:
            raise ValueError("Notifications must reference a report")

    def is_for_admins(self) -> bool:
        """Return ``True`` when the notification is addressed to all admins."""

        return self.recipient_type == RECIPIENT_TYPE_ADMIN


@dataclass(frozen=True)
class NotificationScope:
    """Selection of notifications owned by a single recipient."""

    recipient_type: str
    recipient: str | None = None

    @classmethod
    def for_admins(cls) -> "NotificationScope":
        return cls(recipient_type=RECIPIENT_TYPE_ADMIN)

    @classmethod
    def for_user(cls, user_id: str) -> "NotificationScope":
        if not user_id:
            raise ValueError("A user scope requires a user id")
        return cls(recipient_type=RECIPIENT_TYPE_USER, recipient=user_id)


__all__ = [
    "Notification",
    "NotificationScope",
    "RECIPIENT_TYPE_USER",
    "RECIPIENT_TYPE_ADMIN",
    "RECIPIENT_TYPES",
    "NOTIFICATION_TYPE_NEW_REPORT",
    "NOTIFICATION_TYPE_STATUS_UPDATE",
    "NOTIFICATION_TYPE_ADMIN_NOTE",
    "NOTIFICATION_TYPES",
]
