"""Tests for the notification store access layer and entity invariants."""

import pytest

from crimewatch.domain.entities import Notification, NotificationScope
from crimewatch.infrastructure.repositories import NotificationRepository


def test_user_notification_requires_recipient():
    with pytest.raises(ValueError):
        Notification(
            id=None,
            recipient_type="user",
            recipient=None,
            type="status_update",
            title="t",
            message="m",
            report_id="r",
        )


def test_admin_notification_rejects_individual_recipient():
    with pytest.raises(ValueError):
        Notification(
            id=None,
            recipient_type="admin",
            recipient="u1",
            type="new_report",
            title="t",
            message="m",
            report_id="r",
        )


def test_unknown_notification_type_is_rejected():
    with pytest.raises(ValueError):
        Notification(
            id=None,
            recipient_type="admin",
            recipient=None,
            type="reminder",
            title="t",
            message="m",
            report_id="r",
        )


def test_lists_are_newest_first_and_scoped(session, notification_factory):
    for _ in range(4):
        notification_factory(user_id="u1")
    notification_factory(user_id="u2")
    notification_factory()

    repository = NotificationRepository(session)
    listed = repository.list(NotificationScope.for_user("u1"), limit=None)

    assert len(listed) == 4
    assert {item.recipient for item in listed} == {"u1"}
    timestamps = [item.created_at for item in listed]
    assert timestamps == sorted(timestamps, reverse=True)
    assert repository.count(NotificationScope.for_admins()) == 1


def test_unread_listing_respects_limit(session, notification_factory):
    for index in range(6):
        notification_factory(user_id="u1", read=index % 2 == 0)

    unread = NotificationRepository(session).list_unread(
        NotificationScope.for_user("u1"), limit=2
    )

    assert len(unread) == 2
    assert all(not item.read for item in unread)


def test_mark_as_read_is_idempotent(session, notification_factory):
    notification = notification_factory(user_id="u1")
    repository = NotificationRepository(session)
    scope = NotificationScope.for_user("u1")

    first = repository.mark_as_read(notification.id)
    second = repository.mark_as_read(notification.id)

    assert first.read is True
    assert second.read is True
    assert repository.count_unread(scope) == 0
    assert repository.mark_as_read("00000000-0000-4000-8000-000000000000") is None


def test_mark_all_and_delete_all_only_touch_the_scope(session, notification_factory):
    for _ in range(3):
        notification_factory(user_id="u1")
    other = notification_factory(user_id="u2")
    admin = notification_factory()
    repository = NotificationRepository(session)

    assert repository.mark_all_as_read(NotificationScope.for_user("u1")) == 3
    assert repository.get(other.id).read is False
    assert repository.get(admin.id).read is False

    assert repository.delete_all(NotificationScope.for_user("u1")) == 3
    assert repository.count(NotificationScope.for_user("u1")) == 0
    assert repository.delete(other.id) is True
    assert repository.delete(other.id) is False
    assert repository.get(admin.id) is not None


def test_user_scope_requires_user_id():
    with pytest.raises(ValueError):
        NotificationScope.for_user("")
