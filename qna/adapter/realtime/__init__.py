"""Real-time event delivery over WebSockets."""

from .websocket import WebSocketBroadcaster

__all__ = ["WebSocketBroadcaster"]
