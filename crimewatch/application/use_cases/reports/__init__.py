"""Use cases for the crime report lifecycle."""

from .add_admin_note import add_admin_note
from .create_report import create_report
from .get_report import get_report
from .update_report_status import update_report_status
from .validators import REPORT_NOT_FOUND

__all__ = [
    "add_admin_note",
    "create_report",
    "get_report",
    "update_report_status",
    "REPORT_NOT_FOUND",
]
