"""Mock realtime providers for testing."""

from uuid import UUID

from dishka import Scope, provide

from qna.adapter.realtime import WebSocketBroadcaster
from qna.domain.service import Broadcaster
from qna.util.di.infrastructure.realtime import RealtimeProvider


class RecordingBroadcaster(Broadcaster):
    """Broadcaster that keeps every published event for assertions.

    ``events`` holds (topic, payload); ``recipients`` holds the matching
    target user, None for broadcasts to everyone.
    """

    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []
        self.recipients: list[UUID | None] = []

    async def publish(
        self, topic: str, payload: dict, user_id: UUID | None = None
    ) -> None:
        self.events.append((topic, payload))
        self.recipients.append(user_id)


class MockRealtimeProvider(RealtimeProvider):
    """Mock realtime provider recording events instead of sending them."""

    __is_mock__ = True

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_websocket_broadcaster(self) -> WebSocketBroadcaster:
        """Provide a WebSocket hub for the /ws route."""
        return WebSocketBroadcaster()

    @provide(scope=Scope.APP)
    def get_broadcaster(self) -> Broadcaster:
        """Provide the recording broadcaster."""
        return RecordingBroadcaster()
