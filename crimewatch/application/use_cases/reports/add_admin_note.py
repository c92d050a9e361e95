"""Use case for annotating a report on behalf of an administrator."""

from sqlalchemy.orm import Session

from crimewatch.application.use_cases.notifications import NotificationDispatcher
from crimewatch.domain.entities import AdminNote, Report
from crimewatch.infrastructure.repositories import ReportRepository

from .validators import REPORT_NOT_FOUND, normalize_required_text


def add_admin_note(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    report_id: str,
    content: str,
    attachment: str | None = None,
) -> Report:
    """Append a note to the report and notify its owner."""

    cleaned = normalize_required_text(content, "El contenido de la nota")
    updated = ReportRepository(session).add_note(
        report_id, AdminNote(id=None, content=cleaned, attachment=attachment)
    )
    if updated is None:
        raise ValueError(REPORT_NOT_FOUND)

    owner = updated.owner_to_notify()
    if owner:
        dispatcher.notify_user_admin_note(owner, updated, cleaned)
    return updated
