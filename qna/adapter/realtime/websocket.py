"""WebSocket broadcaster.

Keeps the set of sockets connected to this process and fans published
events out to them. A socket opened with a valid token also belongs to its
user, so events addressed to that user reach only their sockets. Each
message is a JSON object:

    {"event": "vote_updated", "data": {...}, "timestamp": "..."}
"""

import asyncio
import json
from datetime import datetime, timezone
from uuid import UUID

import logfire
from fastapi import WebSocket

from qna.adapter.error import BroadcastError
from qna.domain.service.broadcaster import Broadcaster


class WebSocketBroadcaster(Broadcaster):
    """In-process hub of connected FastAPI WebSockets."""

    def __init__(self, send_timeout: float = 2.0) -> None:
        """Initialize the hub.

        Args:
            send_timeout: Seconds a single socket may take to accept a
                message before it is dropped
        """
        self.send_timeout = send_timeout
        self._connections: dict[WebSocket, UUID | None] = {}
        self._lock = asyncio.Lock()

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket, user_id: UUID | None = None) -> None:
        """Accept a socket and start delivering events to it.

        Args:
            websocket: Socket to register
            user_id: Authenticated owner, if the client sent a token
        """
        await websocket.accept()
        async with self._lock:
            self._connections[websocket] = user_id
        logfire.info(
            "WebSocket connected",
            connections=self.connection_count,
            authenticated=user_id is not None,
        )

    async def disconnect(self, websocket: WebSocket) -> None:
        """Stop delivering events to a socket."""
        async with self._lock:
            self._connections.pop(websocket, None)
        logfire.info("WebSocket disconnected", connections=self.connection_count)

    async def publish(
        self, topic: str, payload: dict, user_id: UUID | None = None
    ) -> None:
        """Send an event to every matching socket at once.

        Sockets that fail or time out are dropped.

        Raises:
            BroadcastError: If the payload is not JSON-serializable
        """
        try:
            message = json.dumps(
                {
                    "event": topic,
                    "data": payload,
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                }
            )
        except (TypeError, ValueError) as e:
            raise BroadcastError(f"Cannot encode {topic} event: {e}") from e

        async with self._lock:
            recipients = [
                websocket
                for websocket, owner in self._connections.items()
                if user_id is None or owner == user_id
            ]

        results = await asyncio.gather(
            *(self._send(websocket, message) for websocket in recipients)
        )
        dead = [websocket for websocket, ok in zip(recipients, results) if not ok]

        if dead:
            async with self._lock:
                for websocket in dead:
                    self._connections.pop(websocket, None)

        logfire.debug(
            "Broadcast sent",
            topic=topic,
            delivered=len(recipients) - len(dead),
            dropped=len(dead),
        )

    async def _send(self, websocket: WebSocket, message: str) -> bool:
        try:
            await asyncio.wait_for(websocket.send_text(message), self.send_timeout)
        except asyncio.TimeoutError:
            logfire.warn("Dropping slow WebSocket", timeout=self.send_timeout)
            return False
        except Exception as e:
            logfire.debug("Dropping dead WebSocket", error=str(e))
            return False
        return True
