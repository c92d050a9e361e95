"""Use case for moving a report through its investigation statuses."""

from sqlalchemy.orm import Session

from crimewatch.application.use_cases.notifications import NotificationDispatcher
from crimewatch.domain.entities import REPORT_STATUSES, Report
from crimewatch.infrastructure.repositories import ReportRepository

from .validators import REPORT_NOT_FOUND


def update_report_status(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    report_id: str,
    status: str,
) -> Report:
    """Change the status of a report and notify its owner."""

    if status not in REPORT_STATUSES:
        raise ValueError("Estado inválido")

    repository = ReportRepository(session)
    report = repository.get(report_id)
    if report is None:
        raise ValueError(REPORT_NOT_FOUND)

    old_status = report.status
    updated = repository.update_status(report_id, status)
    if updated is None:
        raise ValueError(REPORT_NOT_FOUND)

    owner = updated.owner_to_notify()
    if owner:
        dispatcher.notify_user_status_update(owner, updated, old_status, status)
    return updated
