"""Rutas para registrar y gestionar reportes de delitos."""

from __future__ import annotations

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from crimewatch.application.use_cases.notifications import NotificationDispatcher
from crimewatch.application.use_cases.reports import (
    REPORT_NOT_FOUND,
    add_admin_note as add_admin_note_uc,
    create_report as create_report_uc,
    get_report as get_report_uc,
    update_report_status as update_report_status_uc,
)
from crimewatch.domain.entities import Report
from crimewatch.infrastructure.database import get_db
from crimewatch.interfaces.api.dependencies import (
    Identity,
    ensure_identifier,
    get_notification_dispatcher,
    get_optional_identity,
    require_admin,
)
from crimewatch.interfaces.api.schemas import (
    AdminNoteCreate,
    ReportCreate,
    ReportRead,
    ReportStatusUpdate,
)

router = APIRouter(prefix="/reports", tags=["reports"])
logger = logging.getLogger(__name__)

_INVALID_REPORT_ID = "Identificador de reporte inválido"


def _to_read_model(report: Report) -> ReportRead:
    return ReportRead.model_validate(report)


def _raise_for_use_case_error(exc: ValueError) -> NoReturn:
    detail = str(exc)
    status_code = status.HTTP_400_BAD_REQUEST
    if detail == REPORT_NOT_FOUND:
        status_code = status.HTTP_404_NOT_FOUND
    raise HTTPException(status_code=status_code, detail=detail) from exc


@router.post("/", response_model=ReportRead, status_code=status.HTTP_201_CREATED)
def register_report(
    report_in: ReportCreate,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    identity: Identity | None = Depends(get_optional_identity),
) -> ReportRead:
    """Registra un nuevo reporte y avisa a los administradores."""

    user_id = identity.subject_id if identity and not identity.is_admin else None
    try:
        report = create_report_uc(
            db,
            dispatcher,
            title=report_in.title,
            description=report_in.description,
            location=report_in.location,
            phone=report_in.phone,
            cnic=report_in.cnic,
            is_anonymous=report_in.is_anonymous or user_id is None,
            user_id=user_id,
            image=report_in.image,
        )
    except ValueError as exc:
        _raise_for_use_case_error(exc)
    logger.info("Report %s registered (anonymous=%s)", report.id, report.is_anonymous)
    return _to_read_model(report)


@router.get("/{report_id}", response_model=ReportRead)
def read_report(
    report_id: str,
    db: Session = Depends(get_db),
) -> ReportRead:
    """Obtiene el reporte identificado por ``report_id``."""

    ensure_identifier(report_id, _INVALID_REPORT_ID)
    try:
        report = get_report_uc(db, report_id)
    except ValueError as exc:
        _raise_for_use_case_error(exc)
    return _to_read_model(report)


@router.put("/{report_id}/status", response_model=ReportRead)
def update_report_status(
    report_id: str,
    status_in: ReportStatusUpdate,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    _: Identity = Depends(require_admin),
) -> ReportRead:
    """Actualiza el estado de un reporte y notifica a su autor."""

    ensure_identifier(report_id, _INVALID_REPORT_ID)
    try:
        report = update_report_status_uc(
            db, dispatcher, report_id=report_id, status=status_in.status
        )
    except ValueError as exc:
        _raise_for_use_case_error(exc)
    return _to_read_model(report)


@router.post("/{report_id}/notes", response_model=ReportRead)
def add_admin_note(
    report_id: str,
    note_in: AdminNoteCreate,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    _: Identity = Depends(require_admin),
) -> ReportRead:
    """Agrega una nota administrativa al reporte y notifica a su autor."""

    ensure_identifier(report_id, _INVALID_REPORT_ID)
    try:
        report = add_admin_note_uc(
            db,
            dispatcher,
            report_id=report_id,
            content=note_in.content,
            attachment=note_in.attachment,
        )
    except ValueError as exc:
        _raise_for_use_case_error(exc)
    return _to_read_model(report)
