"""Aggregate application use cases."""

from .notifications import NotificationDispatcher
from .reports import add_admin_note, create_report, update_report_status

__all__ = [
    "NotificationDispatcher",
    "add_admin_note",
    "create_report",
    "update_report_status",
]
