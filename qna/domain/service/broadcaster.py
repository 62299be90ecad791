"""Real-time event fan-out capability."""

from uuid import UUID

import logfire


class Broadcaster:
    """Generic interface for pushing events to connected clients.

    Delivery is best-effort: callers must not depend on a publish reaching
    anyone, and a failed publish never undoes the change it reports.
    """

    async def publish(
        self, topic: str, payload: dict, user_id: UUID | None = None
    ) -> None:
        """Publish an event.

        Args:
            topic: Event name (e.g. ``vote_updated``)
            payload: JSON-serializable event body
            user_id: Deliver only to this user's connections; None for everyone
        """
        raise NotImplementedError


class NullBroadcaster(Broadcaster):
    """Broadcaster that drops every event.

    For contexts without a live transport (tests, batch jobs).
    """

    async def publish(
        self, topic: str, payload: dict, user_id: UUID | None = None
    ) -> None:
        logfire.debug("Dropping broadcast", topic=topic)


class EventOutbox(Broadcaster):
    """Holds a request's events until its writes are committed.

    Services publish into the outbox as usual. Whoever owns the transaction
    calls ``flush`` after a successful commit, or ``discard`` on rollback,
    so clients never hear about a change that was not stored.
    """

    def __init__(self, broadcaster: Broadcaster) -> None:
        self.broadcaster = broadcaster
        self._pending: list[tuple[str, dict, UUID | None]] = []

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def publish(
        self, topic: str, payload: dict, user_id: UUID | None = None
    ) -> None:
        self._pending.append((topic, payload, user_id))

    async def flush(self) -> None:
        """Hand every held event to the real broadcaster, in order.

        A failing publish is logged and skipped.
        """
        pending, self._pending = self._pending, []
        for topic, payload, user_id in pending:
            try:
                await self.broadcaster.publish(topic, payload, user_id)
            except Exception as e:
                logfire.warn("Broadcast failed", topic=topic, error=str(e))

    def discard(self) -> None:
        """Drop held events after a rollback."""
        if self._pending:
            logfire.info("Discarding unsent events", count=len(self._pending))
        self._pending = []
