"""Websocket gateway bridging client connections, presence and the notification store."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from anyio import to_thread
from fastapi import WebSocket, WebSocketDisconnect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from crimewatch.domain.entities import NotificationScope
from crimewatch.infrastructure.repositories import NotificationRepository
from crimewatch.utils import is_valid_identifier

from .presence import PresenceRegistry
from .publisher import LOAD_NOTIFICATIONS_EVENT, serialize_notification

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConnectionState(str, enum.Enum):
    CONNECTED = "connected"
    IDENTIFIED = "identified"
    CLOSED = "closed"


@dataclass
class GatewayConnection:
    """Lifecycle bookkeeping for one websocket client."""

    websocket: WebSocket
    state: ConnectionState = ConnectionState.CONNECTED
    user_id: str | None = None
    is_admin: bool = False

    def identify_as_user(self, user_id: str) -> None:
        self.user_id = user_id
        if self.state is ConnectionState.CONNECTED:
            self.state = ConnectionState.IDENTIFIED

    def identify_as_admin(self) -> None:
        self.is_admin = True
        if self.state is ConnectionState.CONNECTED:
            self.state = ConnectionState.IDENTIFIED

    def close(self) -> None:
        self.state = ConnectionState.CLOSED


class NotificationGateway:
    """Serve the notification websocket protocol for a single process.

    Inbound events are ``join_user``, ``join_admin``, ``mark_notification_read``,
    ``mark_all_notifications_read`` and ``ping``. Store access runs in a worker
    thread with its own session so a slow query never stalls other clients.
    """

    def __init__(
        self,
        registry: PresenceRegistry,
        session_factory: Callable[[], Session],
        *,
        initial_load_limit: int = 50,
    ) -> None:
        self._registry = registry
        self._session_factory = session_factory
        self._initial_load_limit = initial_load_limit
        self._handlers = {
            "join_user": self._join_user,
            "join_admin": self._join_admin,
            "mark_notification_read": self._mark_read,
            "mark_all_notifications_read": self._mark_all_read,
            "ping": self._ping,
        }

    async def serve(self, websocket: WebSocket) -> None:
        """Accept ``websocket`` and process its messages until it disconnects."""

        await websocket.accept()
        connection = GatewayConnection(websocket)
        logger.info("Notification client connected")
        try:
            while True:
                try:
                    message = await websocket.receive_json()
                except WebSocketDisconnect:
                    raise
                except (KeyError, ValueError):
                    await self._send_error(websocket, "Mensaje inválido")
                    continue

                if not isinstance(message, dict):
                    await self._send_error(websocket, "Mensaje inválido")
                    continue

                await self.handle(connection, message.get("type"), message.get("data"))
        except WebSocketDisconnect:
            pass
        finally:
            self.disconnect(connection)

    async def handle(self, connection: GatewayConnection, event: Any, data: Any) -> None:
        handler = self._handlers.get(event) if isinstance(event, str) else None
        if handler is None:
            await self._send_error(connection.websocket, "Evento no soportado")
            return
        await handler(connection, data)

    def disconnect(self, connection: GatewayConnection) -> None:
        self._registry.unregister(connection.websocket)
        connection.close()
        logger.info(
            "Notification client disconnected (user=%s, admin=%s)",
            connection.user_id,
            connection.is_admin,
        )

    async def _join_user(self, connection: GatewayConnection, data: Any) -> None:
        if not is_valid_identifier(data):
            await self._send_error(connection.websocket, "Identificador de usuario inválido")
            return

        self._registry.register_user(data, connection.websocket)
        connection.identify_as_user(data)
        logger.info(
            "User %s joined notifications (%s users connected)",
            data,
            self._registry.connected_users,
        )
        await self._send_initial_load(connection, NotificationScope.for_user(data))

    async def _join_admin(self, connection: GatewayConnection, data: Any) -> None:
        self._registry.register_admin(connection.websocket)
        connection.identify_as_admin()
        logger.info("Admin joined notifications (%s connected)", self._registry.connected_admins)
        await self._send_initial_load(connection, NotificationScope.for_admins())

    async def _mark_read(self, connection: GatewayConnection, data: Any) -> None:
        if not is_valid_identifier(data):
            await self._send_error(connection.websocket, "Identificador de notificación inválido")
            return

        updated = await self._run_store(lambda repository: repository.mark_as_read(data))
        if updated is None:
            logger.debug("Notification %s could not be marked as read", data)

    async def _mark_all_read(self, connection: GatewayConnection, data: Any) -> None:
        payload = data if isinstance(data, dict) else {}
        if payload.get("isAdmin"):
            scope = NotificationScope.for_admins()
        elif is_valid_identifier(payload.get("userId")):
            scope = NotificationScope.for_user(payload["userId"])
        else:
            await self._send_error(connection.websocket, "Identificador de usuario inválido")
            return

        updated = await self._run_store(lambda repository: repository.mark_all_as_read(scope))
        logger.debug("Marked %s notifications as read for %s", updated, scope)

    async def _ping(self, connection: GatewayConnection, data: Any) -> None:
        await connection.websocket.send_json({"type": "pong"})

    async def _send_initial_load(
        self, connection: GatewayConnection, scope: NotificationScope
    ) -> None:
        limit = self._initial_load_limit
        unread = await self._run_store(lambda repository: repository.list_unread(scope, limit=limit))
        if unread is None:
            return
        await connection.websocket.send_json(
            {
                "type": LOAD_NOTIFICATIONS_EVENT,
                "data": [serialize_notification(notification) for notification in unread],
            }
        )
        logger.debug("Sent %s unread notifications to %s", len(unread), scope)

    async def _run_store(self, operation: Callable[[NotificationRepository], T]) -> T | None:
        def run() -> T:
            session = self._session_factory()
            try:
                return operation(NotificationRepository(session))
            finally:
                session.close()

        try:
            return await to_thread.run_sync(run)
        except SQLAlchemyError:
            logger.exception("Notification store operation failed")
            return None

    @staticmethod
    async def _send_error(websocket: WebSocket, detail: str) -> None:
        await websocket.send_json({"type": "error", "data": {"detail": detail}})


__all__ = ["ConnectionState", "GatewayConnection", "NotificationGateway"]
