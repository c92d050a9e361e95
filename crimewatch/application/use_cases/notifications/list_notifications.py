"""Use case for paginating the notifications of a recipient."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from crimewatch.domain.entities import Notification, NotificationScope
from crimewatch.infrastructure.repositories import NotificationRepository


@dataclass(frozen=True)
class NotificationPage:
    """One page of notifications plus the counters shown next to the bell."""

    notifications: Sequence[Notification]
    unread_count: int
    current_page: int
    total_pages: int


def list_notifications(
    session: Session, scope: NotificationScope, *, page: int = 1, limit: int = 20
) -> NotificationPage:
    """Return page ``page`` of the newest-first notifications in ``scope``."""

    if page < 1 or limit < 1:
        raise ValueError("Parámetros de paginación inválidos")

    repository = NotificationRepository(session)
    notifications = repository.list(scope, skip=(page - 1) * limit, limit=limit)
    total = repository.count(scope)
    return NotificationPage(
        notifications=notifications,
        unread_count=repository.count_unread(scope),
        current_page=page,
        total_pages=math.ceil(total / limit),
    )
