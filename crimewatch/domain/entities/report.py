"""Domain entities describing citizen crime reports."""

from dataclasses import dataclass, field
from datetime import datetime

REPORT_STATUS_PENDING = "Pending"
REPORT_STATUS_INVESTIGATING = "Investigating"
REPORT_STATUS_RESOLVED = "Resolved"
REPORT_STATUS_CLOSED = "Closed"
REPORT_STATUSES = (
    REPORT_STATUS_PENDING,
    REPORT_STATUS_INVESTIGATING,
    REPORT_STATUS_RESOLVED,
    REPORT_STATUS_CLOSED,
)


@dataclass
class AdminNote:
    """Annotation added to a report by an administrator."""

    id: str | None
    content: str
    attachment: str | None = None
    created_at: datetime | None = None


@dataclass
class Report:
    """Incident submitted by a citizen, optionally without identifying them."""

    id: str | None
    title: str
    description: str
    location: str
    phone: str | None
    cnic: str | None
    is_anonymous: bool
    user_id: str | None
    image: str | None = None
    status: str = REPORT_STATUS_PENDING
    notes: list[AdminNote] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def owner_to_notify(self) -> str | None:
        """Return the user that should hear about changes to this report."""

        if self.is_anonymous:
            return None
        return self.user_id


__all__ = [
    "AdminNote",
    "Report",
    "REPORT_STATUS_PENDING",
    "REPORT_STATUS_INVESTIGATING",
    "REPORT_STATUS_RESOLVED",
    "REPORT_STATUS_CLOSED",
    "REPORT_STATUSES",
]
