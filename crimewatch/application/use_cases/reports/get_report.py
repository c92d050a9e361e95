"""Use case for retrieving a single report."""

from sqlalchemy.orm import Session

from crimewatch.domain.entities import Report
from crimewatch.infrastructure.repositories import ReportRepository

from .validators import REPORT_NOT_FOUND


def get_report(session: Session, report_id: str) -> Report:
    """Return the report identified by ``report_id`` or raise an error."""

    report = ReportRepository(session).get(report_id)
    if report is None:
        raise ValueError(REPORT_NOT_FOUND)
    return report
