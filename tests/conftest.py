"""Shared fixtures for the test suite.

The database URL must be configured before any ``crimewatch`` module is
imported because the engine is created at import time.
"""

from __future__ import annotations

import os
import sys
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "crimewatch_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["APP_TIMEZONE"] = "UTC"

from crimewatch.config import get_settings  # noqa: E402

get_settings.cache_clear()

from crimewatch.domain.entities import (  # noqa: E402
    NOTIFICATION_TYPE_NEW_REPORT,
    NOTIFICATION_TYPE_STATUS_UPDATE,
    RECIPIENT_TYPE_ADMIN,
    RECIPIENT_TYPE_USER,
    Notification,
    Report,
)
from crimewatch.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from crimewatch.infrastructure.notifications import PresenceRegistry  # noqa: E402
from crimewatch.infrastructure.repositories import (  # noqa: E402
    NotificationRepository,
    ReportRepository,
)

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeConnection:
    """Stand-in for a websocket that records every pushed message."""

    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.messages: list[dict[str, Any]] = []

    async def send_json(self, message: dict[str, Any]) -> None:
        if self.fail:
            raise RuntimeError("connection closed")
        self.messages.append(message)


@pytest.fixture()
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def registry() -> PresenceRegistry:
    return PresenceRegistry()


@pytest.fixture()
def connection_factory():
    return FakeConnection


@pytest.fixture()
def report_factory(session):
    """Create reports directly through the repository."""

    def _create(
        *,
        title: str = "Stolen bicycle",
        location: str = "Main Street",
        user_id: str | None = None,
        is_anonymous: bool = False,
    ) -> Report:
        return ReportRepository(session).create(
            Report(
                id=None,
                title=title,
                description="Reported by a neighbour",
                location=location,
                phone=None if is_anonymous else "555-0100",
                cnic=None if is_anonymous else "12345-1234567-1",
                is_anonymous=is_anonymous,
                user_id=None if is_anonymous else user_id,
            )
        )

    return _create


@pytest.fixture()
def notification_factory(session, report_factory):
    """Persist notifications with predictable, strictly increasing timestamps."""

    counter = {"value": 0}

    def _create(
        *,
        user_id: str | None = None,
        read: bool = False,
        report: Report | None = None,
    ) -> Notification:
        counter["value"] += 1
        target_report = report or report_factory()
        is_admin = user_id is None
        return NotificationRepository(session).create(
            Notification(
                id=None,
                recipient_type=RECIPIENT_TYPE_ADMIN if is_admin else RECIPIENT_TYPE_USER,
                recipient=user_id,
                type=NOTIFICATION_TYPE_NEW_REPORT if is_admin else NOTIFICATION_TYPE_STATUS_UPDATE,
                title=f"Notification {counter['value']}",
                message="Something happened",
                report_id=target_report.id,
                read=read,
                created_at=BASE_TIME + timedelta(minutes=counter["value"]),
            )
        )

    return _create


@pytest.fixture()
def client():
    """Return a test client bound to a clean application instance."""

    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
