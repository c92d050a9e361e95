"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc, false
from sqlalchemy.orm import Query, Session

from crimewatch.domain.entities import Notification, NotificationScope, RECIPIENT_TYPE_USER
from crimewatch.infrastructure.models import NotificationModel
from crimewatch.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class NotificationRepository:
    """Provide storage operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: str) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model is not None else None

    def list(
        self,
        scope: NotificationScope,
        *,
        skip: int = 0,
        limit: int | None = 20,
    ) -> Sequence[Notification]:
        query = self._newest_first(self._scoped(scope))
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_unread(
        self, scope: NotificationScope, *, limit: int | None = 50
    ) -> Sequence[Notification]:
        query = self._scoped(scope).filter(NotificationModel.read == false())
        query = self._newest_first(query)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count(self, scope: NotificationScope) -> int:
        return self._scoped(scope).count()

    def count_unread(self, scope: NotificationScope) -> int:
        return self._scoped(scope).filter(NotificationModel.read == false()).count()

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            recipient_type=notification.recipient_type,
            recipient=notification.recipient,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            report_id=notification.report_id,
            read=notification.read,
            created_at=ensure_app_naive_datetime(
                notification.created_at or now_in_app_timezone()
            ),
        )
        if notification.id is not None:
            model.id = notification.id
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: str) -> Notification | None:
        """Flag a single notification as read; ``None`` when it does not exist."""

        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return None
        if not model.read:
            model.read = True
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_as_read(self, scope: NotificationScope) -> int:
        updated = (
            self._scoped(scope)
            .filter(NotificationModel.read == false())
            .update({NotificationModel.read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    def delete(self, notification_id: str) -> bool:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def delete_all(self, scope: NotificationScope) -> int:
        deleted = self._scoped(scope).delete(synchronize_session=False)
        self.session.commit()
        return deleted

    def _scoped(self, scope: NotificationScope) -> Query:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.recipient_type == scope.recipient_type
        )
        if scope.recipient_type == RECIPIENT_TYPE_USER:
            query = query.filter(NotificationModel.recipient == scope.recipient)
        return query

    @staticmethod
    def _newest_first(query: Query) -> Query:
        return query.order_by(desc(NotificationModel.created_at), desc(NotificationModel.id))

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_type=model.recipient_type,
            recipient=model.recipient,
            type=model.type,
            title=model.title,
            message=model.message,
            report_id=model.report_id,
            read=bool(model.read),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]
