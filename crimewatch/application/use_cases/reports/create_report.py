"""Use case for submitting a new crime report."""

from __future__ import annotations

from sqlalchemy.orm import Session

from crimewatch.application.use_cases.notifications import NotificationDispatcher
from crimewatch.domain.entities import Report
from crimewatch.infrastructure.repositories import ReportRepository

from .validators import normalize_required_text


def create_report(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    title: str,
    description: str,
    location: str,
    phone: str | None = None,
    cnic: str | None = None,
    is_anonymous: bool = False,
    user_id: str | None = None,
    image: str | None = None,
) -> Report:
    """Persist a report and let the administrators know about it.

    Anonymous reports never keep a reference to the submitting user. Reports
    filed under a name must include contact details.
    """

    phone = (phone or "").strip() or None
    cnic = (cnic or "").strip() or None
    if not is_anonymous and (phone is None or cnic is None):
        raise ValueError("El CNIC y el teléfono son obligatorios para reportes no anónimos")

    report = Report(
        id=None,
        title=normalize_required_text(title, "El título"),
        description=normalize_required_text(description, "La descripción"),
        location=normalize_required_text(location, "La ubicación"),
        phone=phone,
        cnic=cnic,
        is_anonymous=is_anonymous,
        user_id=None if is_anonymous else user_id,
        image=image,
    )
    created = ReportRepository(session).create(report)
    dispatcher.notify_admins_new_report(created)
    return created
