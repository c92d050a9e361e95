"""ORM models used by the application infrastructure."""

from .report import AdminNoteModel, ReportModel
from .notification import NotificationModel

__all__ = [
    "AdminNoteModel",
    "ReportModel",
    "NotificationModel",
]
