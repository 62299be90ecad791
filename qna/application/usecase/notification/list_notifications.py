"""List notifications use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire

from qna.application.usecase.base import (
    ApiModel,
    BaseUseCase,
    PageRequest,
    PaginationMeta,
)
from qna.domain.model import Notification
from qna.domain.service import NotificationService
from qna.domain.value import NotificationType, UserId


def _optional_str(value: Optional[UUID]) -> Optional[str]:
    return str(value) if value is not None else None


class NotificationInfo(ApiModel):
    """Notification as returned to its recipient."""

    id: str
    type: NotificationType
    message: str
    sender: Optional[str] = None
    question: Optional[str] = None
    answer: Optional[str] = None
    comment: Optional[str] = None
    is_read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationInfo":
        return cls(
            id=str(notification.id),
            type=notification.type,
            message=notification.message,
            sender=_optional_str(notification.sender_id),
            question=_optional_str(notification.question_id),
            answer=_optional_str(notification.answer_id),
            comment=_optional_str(notification.comment_id),
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(ApiModel):
    """List notifications request."""

    user_id: str  # User ID from authenticated user
    unread_only: bool = False
    page: PageRequest = PageRequest()


class ListNotificationsResponse(ApiModel):
    """Page of notifications plus the unread badge count."""

    notifications: list[NotificationInfo]
    unread_count: int
    pagination: PaginationMeta


class ListNotificationsUseCase(BaseUseCase):
    """Use case for a user's notification feed, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow."""
        with logfire.span("list_notifications.execute", user_id=request.user_id):
            recipient_id = UserId(UUID(request.user_id))
            notifications, total = await self.notification_service.list_for_user(
                recipient_id,
                unread_only=request.unread_only,
                limit=request.page.limit,
                offset=request.page.offset,
            )
            unread = await self.notification_service.unread_count(recipient_id)
            return ListNotificationsResponse(
                notifications=[
                    NotificationInfo.from_notification(n) for n in notifications
                ],
                unread_count=unread,
                pagination=PaginationMeta.build(
                    total, request.page.page, request.page.limit
                ),
            )


class UnreadCountRequest(ApiModel):
    """Unread count request."""

    user_id: str


class UnreadCountResponse(ApiModel):
    """Unread count response."""

    count: int


class GetUnreadCountUseCase(BaseUseCase):
    """Use case for the unread notification badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: UnreadCountRequest) -> UnreadCountResponse:
        count = await self.notification_service.unread_count(
            UserId(UUID(request.user_id))
        )
        return UnreadCountResponse(count=count)
