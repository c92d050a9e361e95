from .notification import (
    MessageResponse,
    NotificationBulkResult,
    NotificationPageRead,
    NotificationRead,
    NotificationScopeRequest,
)
from .report import (
    AdminNoteCreate,
    AdminNoteRead,
    ReportCreate,
    ReportRead,
    ReportStatusUpdate,
)

__all__ = [
    "MessageResponse",
    "NotificationBulkResult",
    "NotificationPageRead",
    "NotificationRead",
    "NotificationScopeRequest",
    "AdminNoteCreate",
    "AdminNoteRead",
    "ReportCreate",
    "ReportRead",
    "ReportStatusUpdate",
]
