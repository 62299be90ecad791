"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from qna.domain.model.notification import Notification
from qna.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Every mutating operation is scoped to the recipient, so one user can
    never touch another user's notifications.
    """

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a new notification."""
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Find one of a recipient's notifications by ID."""
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first.

        Args:
            recipient_id: The recipient's ID
            unread_only: Skip notifications already read
            limit: Maximum number to return
            offset: Number to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a recipient's notifications."""
        pass

    @abstractmethod
    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark one notification read.

        Returns:
            The updated notification, or None if the recipient has no such
            notification
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification read.

        Returns:
            Number of notifications changed
        """
        pass

    @abstractmethod
    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Delete one notification.

        Returns:
            True if it existed and was deleted
        """
        pass
