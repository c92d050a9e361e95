"""Endpoints and websocket handler for realtime notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, WebSocket, status
from sqlalchemy.orm import Session

from crimewatch.application.use_cases.notifications import (
    NotificationPage,
    clear_notifications as clear_notifications_uc,
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read as mark_all_notifications_read_uc,
    mark_notification_read as mark_notification_read_uc,
)
from crimewatch.domain.entities import Notification, NotificationScope
from crimewatch.infrastructure.database import get_db
from crimewatch.infrastructure.notifications import NotificationGateway
from crimewatch.interfaces.api.dependencies import ensure_identifier, get_notification_gateway
from crimewatch.interfaces.api.schemas import (
    MessageResponse,
    NotificationBulkResult,
    NotificationPageRead,
    NotificationRead,
    NotificationScopeRequest,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])

_INVALID_NOTIFICATION_ID = "Identificador de notificación inválido"
_INVALID_USER_ID = "Identificador de usuario inválido"


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id,
        recipient_type=notification.recipient_type,
        recipient=notification.recipient,
        type=notification.type,
        title=notification.title,
        message=notification.message,
        report_id=notification.report_id,
        read=notification.read,
        created_at=notification.created_at,
    )


def _page_to_schema(page: NotificationPage) -> NotificationPageRead:
    return NotificationPageRead(
        notifications=[_notification_to_schema(n) for n in page.notifications],
        unread_count=page.unread_count,
        current_page=page.current_page,
        total_pages=page.total_pages,
    )


def _scope_from_request(payload: NotificationScopeRequest) -> NotificationScope:
    if payload.is_admin:
        return NotificationScope.for_admins()
    if payload.user_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_INVALID_USER_ID)
    return NotificationScope.for_user(ensure_identifier(payload.user_id, _INVALID_USER_ID))


@router.get("/user/{user_id}", response_model=NotificationPageRead)
def list_user_notifications(
    user_id: str,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
) -> NotificationPageRead:
    """Devuelve las notificaciones del usuario, de la más reciente a la más antigua."""

    scope = NotificationScope.for_user(ensure_identifier(user_id, _INVALID_USER_ID))
    return _page_to_schema(list_notifications_uc(db, scope, page=page, limit=limit))


@router.get("/admin", response_model=NotificationPageRead)
def list_admin_notifications(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
) -> NotificationPageRead:
    """Devuelve las notificaciones dirigidas a los administradores."""

    scope = NotificationScope.for_admins()
    return _page_to_schema(list_notifications_uc(db, scope, page=page, limit=limit))


@router.put(
    "/read-all", response_model=NotificationBulkResult, response_model_exclude_none=True
)
def mark_all_notifications_read(
    payload: NotificationScopeRequest,
    db: Session = Depends(get_db),
) -> NotificationBulkResult:
    """Marca como leídas todas las notificaciones del alcance indicado."""

    updated = mark_all_notifications_read_uc(db, _scope_from_request(payload))
    return NotificationBulkResult(message="All notifications marked as read", updated=updated)


@router.put("/{notification_id}/read", response_model=NotificationRead)
def mark_notification_read(
    notification_id: str,
    db: Session = Depends(get_db),
) -> NotificationRead:
    """Marca una notificación como leída."""

    ensure_identifier(notification_id, _INVALID_NOTIFICATION_ID)
    try:
        notification = mark_notification_read_uc(db, notification_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _notification_to_schema(notification)


@router.delete(
    "/", response_model=NotificationBulkResult, response_model_exclude_none=True
)
def clear_notifications(
    payload: NotificationScopeRequest,
    db: Session = Depends(get_db),
) -> NotificationBulkResult:
    """Elimina todas las notificaciones del alcance indicado."""

    deleted = clear_notifications_uc(db, _scope_from_request(payload))
    return NotificationBulkResult(message="All notifications cleared", deleted=deleted)


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_notification(
    notification_id: str,
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Elimina una notificación de forma permanente."""

    ensure_identifier(notification_id, _INVALID_NOTIFICATION_ID)
    try:
        delete_notification_uc(db, notification_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MessageResponse(message="Notification deleted successfully")


@router.websocket("/ws")
async def notifications_websocket(
    websocket: WebSocket,
    gateway: NotificationGateway = Depends(get_notification_gateway),
) -> None:
    """Websocket por el que los clientes se identifican y reciben notificaciones."""

    await gateway.serve(websocket)
