"""Repository implementations for infrastructure layer."""

from .report_repository import ReportRepository
from .notification_repository import NotificationRepository

__all__ = [
    "ReportRepository",
    "NotificationRepository",
]
