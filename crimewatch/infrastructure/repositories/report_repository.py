"""Persistence layer for crime reports."""

from __future__ import annotations

from sqlalchemy.orm import Session

from crimewatch.domain.entities import AdminNote, Report
from crimewatch.infrastructure.models import AdminNoteModel, ReportModel
from crimewatch.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class ReportRepository:
    """Provide CRUD operations for :class:`Report` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, report_id: str) -> Report | None:
        model = self.session.get(ReportModel, report_id)
        return self._to_entity(model) if model is not None else None

    def create(self, report: Report) -> Report:
        now = ensure_app_naive_datetime(now_in_app_timezone())
        model = ReportModel(
            title=report.title,
            description=report.description,
            location=report.location,
            phone=report.phone,
            cnic=report.cnic,
            is_anonymous=report.is_anonymous,
            user_id=report.user_id,
            image=report.image,
            status=report.status,
            created_at=now,
            updated_at=now,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(self, report_id: str, status: str) -> Report | None:
        model = self.session.get(ReportModel, report_id)
        if model is None:
            return None
        model.status = status
        model.updated_at = ensure_app_naive_datetime(now_in_app_timezone())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def add_note(self, report_id: str, note: AdminNote) -> Report | None:
        model = self.session.get(ReportModel, report_id)
        if model is None:
            return None
        now = ensure_app_naive_datetime(now_in_app_timezone())
        model.notes.append(
            AdminNoteModel(content=note.content, attachment=note.attachment, created_at=now)
        )
        model.updated_at = now
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ReportModel) -> Report:
        return Report(
            id=model.id,
            title=model.title,
            description=model.description,
            location=model.location,
            phone=model.phone,
            cnic=model.cnic,
            is_anonymous=bool(model.is_anonymous),
            user_id=model.user_id,
            image=model.image,
            status=model.status,
            notes=[
                AdminNote(
                    id=note.id,
                    content=note.content,
                    attachment=note.attachment,
                    created_at=ensure_app_timezone(note.created_at),
                )
                for note in model.notes
            ],
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ReportRepository"]
