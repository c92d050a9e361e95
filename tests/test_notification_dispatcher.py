"""Tests for the notification dispatcher (persist first, push best-effort)."""

from __future__ import annotations

import asyncio
import logging

import pytest
from sqlalchemy.exc import OperationalError

from crimewatch.application.use_cases.notifications import NotificationDispatcher, preview_note
from crimewatch.domain.entities import NotificationScope
from crimewatch.infrastructure.repositories import NotificationRepository


async def _drain() -> None:
    for _ in range(3):
        await asyncio.sleep(0)


def test_new_report_without_admins_is_persisted(session, registry, report_factory):
    report = report_factory(title="Break-in on 5th Ave", location="5th Avenue", is_anonymous=True)
    dispatcher = NotificationDispatcher(session, registry)

    notification = dispatcher.notify_admins_new_report(report)

    assert notification is not None
    assert notification.recipient_type == "admin"
    assert notification.recipient is None
    assert notification.type == "new_report"
    assert "Break-in on 5th Ave" in notification.message
    assert "5th Avenue" in notification.message
    stored = NotificationRepository(session).list(NotificationScope.for_admins())
    assert [item.id for item in stored] == [notification.id]


def test_admin_note_message_is_truncated(session, registry, report_factory):
    report = report_factory(user_id="u7")
    content = "x" * 40 + "y" * 100
    dispatcher = NotificationDispatcher(session, registry)

    notification = dispatcher.notify_user_admin_note("u7", report, content)

    assert notification is not None
    assert notification.message.endswith(": " + content[:100] + "...")
    assert notification.recipient == "u7"
    assert notification.read is False


def test_preview_note_keeps_short_content_untouched():
    assert preview_note("short note") == "short note"
    assert preview_note("a" * 100) == "a" * 100
    assert preview_note("a" * 101) == "a" * 100 + "..."


def test_store_failure_is_logged_and_swallowed(
    session, registry, report_factory, monkeypatch, caplog
):
    report = report_factory(user_id="u1")

    def _fail(self, notification):
        raise OperationalError("INSERT INTO notification", {}, Exception("database down"))

    monkeypatch.setattr(NotificationRepository, "create", _fail)
    dispatcher = NotificationDispatcher(session, registry)

    with caplog.at_level(logging.ERROR):
        result = dispatcher.notify_user_status_update("u1", report, "Pending", "Closed")

    assert result is None
    assert "Could not save status_update notification" in caplog.text


@pytest.mark.anyio
async def test_status_update_is_pushed_to_connected_user(
    session, registry, report_factory, connection_factory
):
    report = report_factory(title="Car theft", user_id="u42")
    user_connection, other_connection = connection_factory(), connection_factory()
    registry.register_user("u42", user_connection)
    registry.register_user("u43", other_connection)
    dispatcher = NotificationDispatcher(session, registry)

    notification = dispatcher.notify_user_status_update(
        "u42", report, "Pending", "Investigating"
    )
    await _drain()

    assert notification is not None
    assert notification.type == "status_update"
    assert notification.message == (
        'Your report "Car theft" status changed from Pending to Investigating'
    )
    assert len(user_connection.messages) == 1
    pushed = user_connection.messages[0]
    assert pushed["type"] == "new_notification"
    assert pushed["data"]["id"] == notification.id
    assert pushed["data"]["read"] is False
    assert other_connection.messages == []


@pytest.mark.anyio
async def test_new_report_is_broadcast_to_every_admin(
    session, registry, report_factory, connection_factory
):
    report = report_factory()
    admins = [connection_factory(), connection_factory()]
    for admin in admins:
        registry.register_admin(admin)
    user_connection = connection_factory()
    registry.register_user("u1", user_connection)

    NotificationDispatcher(session, registry).notify_admins_new_report(report)
    await _drain()

    for admin in admins:
        assert [message["type"] for message in admin.messages] == ["new_notification"]
        assert admin.messages[0]["data"]["recipientType"] == "admin"
    assert user_connection.messages == []


@pytest.mark.anyio
async def test_push_failure_keeps_the_notification(
    session, registry, report_factory, connection_factory
):
    report = report_factory(user_id="u5")
    registry.register_user("u5", connection_factory(fail=True))

    notification = NotificationDispatcher(session, registry).notify_user_admin_note(
        "u5", report, "Please call the station"
    )
    await _drain()

    assert notification is not None
    assert registry.lookup_user("u5") is None
    unread = NotificationRepository(session).list_unread(NotificationScope.for_user("u5"))
    assert [item.id for item in unread] == [notification.id]
