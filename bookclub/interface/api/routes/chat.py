"""WebSocket channel for real-time chat.

Connect with ``ws://host/ws/chat?token=<jwt>``.

Frames sent by the server:
- ``{"type": "connected", "user_id": ...}`` once after the handshake
- ``{"type": "ReceiveMessage", "data": {...}}`` for each new message
- ``{"type": "ping"}`` when the socket has been idle
- ``{"type": "pong"}`` in answer to a client ping
"""

import asyncio

import logfire
from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect

from bookclub.adapter.realtime import ConnectionManager
from bookclub.config import AuthSettings, RealtimeSettings
from bookclub.util.jwt import JWTError, verify_token

# Close code for a rejected token
AUTH_FAILED = 4001

router = APIRouter(tags=["chat"])


@router.websocket("/ws/chat")
async def chat_websocket(
    websocket: WebSocket,
    token: str = Query(..., description="JWT access token"),
) -> None:
    """Register the caller's socket and keep it alive until it closes."""
    # APP-scoped dependencies come straight from the root container
    container = websocket.app.state.dishka_container
    manager = await container.get(ConnectionManager)
    auth_settings = await container.get(AuthSettings)
    realtime_settings = await container.get(RealtimeSettings)

    try:
        user_id = verify_token(token, auth_settings).user_id
    except JWTError as e:
        logfire.warn("WebSocket authentication failed", error=str(e))
        await websocket.close(code=AUTH_FAILED, reason="Authentication failed")
        return

    await manager.connect(user_id, websocket)

    try:
        await websocket.send_json({"type": "connected", "user_id": user_id})

        while True:
            try:
                message = await asyncio.wait_for(
                    websocket.receive_json(),
                    timeout=realtime_settings.ping_interval,
                )
            except asyncio.TimeoutError:
                await websocket.send_json({"type": "ping"})
                continue

            if isinstance(message, dict) and message.get("type") == "ping":
                await websocket.send_json({"type": "pong"})

    except WebSocketDisconnect:
        pass
    except Exception as e:
        logfire.warn("WebSocket error", user_id=user_id, error=str(e))
    finally:
        manager.disconnect(user_id, websocket)
