"""Notification domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from qna.domain.error import NotFoundError
from qna.domain.model import Notification
from qna.domain.repository import NotificationRepository
from qna.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)

from .base import Service
from .broadcaster import Broadcaster
from .user_service import UserService

NOTIFICATION = "notification"

MESSAGES = {
    NotificationType.NEW_ANSWER: "{sender} answered your question",
    NotificationType.ANSWER_ACCEPTED: "{sender} accepted your answer",
    NotificationType.COMMENT_ON_QUESTION: "{sender} commented on your question",
    NotificationType.COMMENT_ON_ANSWER: "{sender} commented on your answer",
}


def notification_payload(notification: Notification) -> dict:
    """Wire shape of a notification event."""
    return {
        "id": str(notification.id),
        "type": notification.type.value,
        "message": notification.message,
        "senderId": str(notification.sender_id) if notification.sender_id else None,
        "questionId": str(notification.question_id)
        if notification.question_id
        else None,
        "answerId": str(notification.answer_id) if notification.answer_id else None,
        "commentId": str(notification.comment_id) if notification.comment_id else None,
        "isRead": notification.is_read,
        "createdAt": notification.created_at.isoformat(),
    }


class NotificationService(Service):
    """Domain service for user notifications.

    Stores one notification per recipient and pushes it to the recipient's
    live connections on the ``notification`` topic.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        user_service: UserService,
        broadcaster: Broadcaster,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            user_service: User domain service (sender names)
            broadcaster: Real-time event publisher
        """
        self.notification_repository = notification_repository
        self.user_service = user_service
        self.broadcaster = broadcaster

    async def notify(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        notification_type: NotificationType,
        question_id: Optional[QuestionId] = None,
        answer_id: Optional[AnswerId] = None,
        comment_id: Optional[CommentId] = None,
    ) -> Notification | None:
        """Notify a user about another user's action.

        Acting on your own content notifies nobody.

        Returns:
            The stored notification, or None when sender and recipient match

        Raises:
            NotFoundError: If the sender doesn't exist
        """
        if recipient_id == sender_id:
            return None

        with logfire.span(
            "notification_service.notify",
            recipient_id=str(recipient_id),
            type=notification_type.value,
        ):
            sender = await self.user_service.get_by_id(sender_id)
            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                sender_id=sender_id,
                type=notification_type,
                message=MESSAGES[notification_type].format(sender=sender.username.root),
                question_id=question_id,
                answer_id=answer_id,
                comment_id=comment_id,
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)

            try:
                await self.broadcaster.publish(
                    NOTIFICATION, notification_payload(saved), user_id=recipient_id
                )
            except Exception as e:
                logfire.warn("Broadcast failed", topic=NOTIFICATION, error=str(e))

            return saved

    async def list_for_user(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Notification], int]:
        """List a user's notifications, newest first.

        Returns:
            Page of notifications and the total count
        """
        notifications = await self.notification_repository.find_by_recipient(
            recipient_id, unread_only=unread_only, limit=limit, offset=offset
        )
        total = await self.notification_repository.count_by_recipient(
            recipient_id, unread_only=unread_only
        )
        return notifications, total

    async def unread_count(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        return await self.notification_repository.count_by_recipient(
            recipient_id, unread_only=True
        )

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Notification:
        """Mark one of the user's notifications read.

        Raises:
            NotFoundError: If the user has no such notification
        """
        notification = await self.notification_repository.mark_read(
            notification_id, recipient_id
        )
        if notification is None:
            raise NotFoundError("Notification", str(notification_id))
        return notification

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all of the user's notifications read.

        Returns:
            Number of notifications that were unread
        """
        changed = await self.notification_repository.mark_all_read(recipient_id)
        logfire.info(
            "Notifications marked read", recipient_id=str(recipient_id), count=changed
        )
        return changed

    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> None:
        """Delete one of the user's notifications.

        Raises:
            NotFoundError: If the user has no such notification
        """
        deleted = await self.notification_repository.delete(
            notification_id, recipient_id
        )
        if not deleted:
            raise NotFoundError("Notification", str(notification_id))
