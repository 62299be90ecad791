"""Real-time delivery infrastructure providers."""

from dishka import Scope, provide

from qna.adapter.realtime import WebSocketBroadcaster
from qna.config import Settings
from qna.domain.service import Broadcaster
from qna.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Realtime component base."""

    __mock_component__ = "realtime"


class ProdRealtimeProvider(RealtimeProvider):
    """Production realtime provider fanning events out over WebSockets."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_websocket_broadcaster(self, settings: Settings) -> WebSocketBroadcaster:
        """Provide the process-wide WebSocket hub."""
        return WebSocketBroadcaster(send_timeout=settings.api.websocket_send_timeout)

    @provide(scope=Scope.APP)
    def get_broadcaster(self, hub: WebSocketBroadcaster) -> Broadcaster:
        """Expose the hub as the domain's broadcaster."""
        return hub
