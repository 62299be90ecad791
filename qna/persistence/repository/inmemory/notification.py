"""In-memory notification repository for testing."""

from typing import Optional

from qna.domain.model import Notification
from qna.domain.repository.notification import NotificationRepository
from qna.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    def _for_recipient(
        self, recipient_id: UserId, unread_only: bool
    ) -> list[Notification]:
        return [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not (unread_only and n.is_read)
        ]

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def find_by_id(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Find one of a recipient's notifications by ID."""
        notification = self._notifications.get(notification_id)
        if notification and notification.recipient_id == recipient_id:
            return notification
        return None

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a recipient's notifications, newest first."""
        notifications = self._for_recipient(recipient_id, unread_only)
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a recipient's notifications."""
        return len(self._for_recipient(recipient_id, unread_only))

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark one notification read."""
        notification = await self.find_by_id(notification_id, recipient_id)
        if not notification:
            return None
        updated = notification.model_copy(update={"is_read": True})
        self._notifications[notification_id] = updated
        return updated

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification read."""
        unread = self._for_recipient(recipient_id, unread_only=True)
        for notification in unread:
            self._notifications[notification.id] = notification.model_copy(
                update={"is_read": True}
            )
        return len(unread)

    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Delete one notification."""
        if await self.find_by_id(notification_id, recipient_id) is None:
            return False
        del self._notifications[notification_id]
        return True
