"""Live WebSocket connections keyed by user."""

import asyncio
from typing import Any

import logfire
from fastapi import WebSocket

from bookclub.domain.service.notifier import RealtimeNotifier
from bookclub.domain.value import UserId


class ConnectionManager(RealtimeNotifier):
    """Manage WebSocket connections by user and push events to them.

    A user may hold several sockets at once (one per tab or device);
    every push goes to all of them. Sockets that fail to receive are
    dropped.
    """

    def __init__(self) -> None:
        # user_id -> list of active connections
        self.active_connections: dict[str, list[WebSocket]] = {}
        self._pending: set[asyncio.Task] = set()

    async def connect(self, user_id: str, websocket: WebSocket) -> None:
        """Accept and register a WebSocket connection."""
        await websocket.accept()
        self.active_connections.setdefault(user_id, []).append(websocket)
        logfire.info(
            "WebSocket connected",
            user_id=user_id,
            connections=len(self.active_connections[user_id]),
        )

    def disconnect(self, user_id: str, websocket: WebSocket) -> None:
        """Remove a WebSocket connection."""
        connections = self.active_connections.get(user_id)
        if connections is None:
            return
        if websocket in connections:
            connections.remove(websocket)
        if not connections:
            del self.active_connections[user_id]
        logfire.info("WebSocket disconnected", user_id=user_id)

    def is_connected(self, user_id: str) -> bool:
        return bool(self.active_connections.get(user_id))

    async def send_to_user(self, user_id: str, message: dict[str, Any]) -> int:
        """Send a frame to every connection of a user.

        Returns:
            Number of connections the frame reached
        """
        delivered = 0
        disconnected = []
        for connection in list(self.active_connections.get(user_id, [])):
            try:
                await connection.send_json(message)
                delivered += 1
            except Exception as e:
                logfire.warn("WebSocket send failed", user_id=user_id, error=str(e))
                disconnected.append(connection)

        for connection in disconnected:
            self.disconnect(user_id, connection)

        return delivered

    def notify_user(
        self, user_id: UserId, event: str, payload: dict[str, Any]
    ) -> None:
        """Queue ``{"type": event, "data": payload}`` for the user and return."""
        if not self.is_connected(user_id):
            logfire.debug("Push skipped, user offline", user_id=user_id, event=event)
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logfire.warn("Push dropped, no running event loop", user_id=user_id)
            return

        task = loop.create_task(
            self.send_to_user(user_id, {"type": event, "data": payload})
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def drain(self) -> None:
        """Wait for every queued push to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
