"""Real-time event stream."""

from uuid import UUID

import logfire
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from qna.adapter.realtime import WebSocketBroadcaster
from qna.domain.service import JWTService

router = APIRouter(tags=["realtime"])


@router.websocket("/ws")
async def events(websocket: WebSocket, token: str | None = None) -> None:
    """Stream server events (e.g. ``vote_updated``) to the client.

    Public events reach every socket. Connecting with ``?token=<jwt>`` also
    subscribes the socket to the user's own ``notification`` events; an
    invalid token connects anonymously.

    Incoming messages are ignored; the socket stays registered until the
    client disconnects.
    """
    container = websocket.app.state.dishka_container
    hub = await container.get(WebSocketBroadcaster)
    jwt_service = await container.get(JWTService)

    user_id = jwt_service.get_user_id_from_token(token)
    await hub.connect(websocket, UUID(user_id) if user_id else None)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logfire.debug("WebSocket client left")
    finally:
        await hub.disconnect(websocket)
