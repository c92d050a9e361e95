"""Registry of notification recipients that are currently reachable."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class PresenceRegistry:
    """Map live websocket connections to users and to the admin set.

    A user id points at exactly one connection: the most recent join wins.
    The registry lives in process memory only and is rebuilt as clients
    rejoin after a restart.
    """

    def __init__(self) -> None:
        self._users: dict[str, WebSocket] = {}
        self._connection_users: dict[WebSocket, str] = {}
        self._admins: set[WebSocket] = set()

    def register_user(self, user_id: str, connection: WebSocket) -> None:
        """Associate ``user_id`` with ``connection``, replacing older entries."""

        previous_user = self._connection_users.get(connection)
        if previous_user is not None and previous_user != user_id:
            self._drop_user_mapping(previous_user, connection)
        self._users[user_id] = connection
        self._connection_users[connection] = user_id

    def register_admin(self, connection: WebSocket) -> None:
        """Add ``connection`` to the set of admin connections."""

        self._admins.add(connection)

    def unregister(self, connection: WebSocket) -> None:
        """Forget every entry keyed by ``connection``; unknown connections are ignored."""

        user_id = self._connection_users.pop(connection, None)
        if user_id is not None:
            self._drop_user_mapping(user_id, connection)
        self._admins.discard(connection)

    def lookup_user(self, user_id: str) -> WebSocket | None:
        return self._users.get(user_id)

    def all_admin_connections(self) -> set[WebSocket]:
        return set(self._admins)

    def clear(self) -> None:
        """Drop all entries, used when the application shuts down."""

        self._users.clear()
        self._connection_users.clear()
        self._admins.clear()

    @property
    def connected_users(self) -> int:
        return len(self._users)

    @property
    def connected_admins(self) -> int:
        return len(self._admins)

    async def send_to_user(self, user_id: str, message: dict[str, Any]) -> bool:
        """Push ``message`` to the connection registered for ``user_id``."""

        connection = self._users.get(user_id)
        if connection is None:
            return False
        return await self._send(connection, message)

    async def send_to_admins(self, message: dict[str, Any]) -> int:
        """Push ``message`` to every admin connection and return the delivery count."""

        delivered = 0
        for connection in list(self._admins):
            if await self._send(connection, message):
                delivered += 1
        return delivered

    async def _send(self, connection: WebSocket, message: dict[str, Any]) -> bool:
        try:
            await connection.send_json(message)
        except Exception:  # stale connection, treated like an absent recipient
            logger.debug("Dropping unreachable notification connection", exc_info=True)
            self.unregister(connection)
            return False
        return True

    def _drop_user_mapping(self, user_id: str, connection: WebSocket) -> None:
        if self._users.get(user_id) is connection:
            del self._users[user_id]


__all__ = ["PresenceRegistry"]
