"""Mark-read and delete notification use cases."""

from uuid import UUID

from qna.application.usecase.base import ApiModel, BaseUseCase
from qna.application.usecase.notification.list_notifications import (
    NotificationInfo,
)
from qna.domain.service import NotificationService
from qna.domain.value import NotificationId, UserId


class NotificationRequest(ApiModel):
    """Request addressing one of the caller's notifications."""

    notification_id: UUID
    user_id: str  # User ID from authenticated user


class MarkNotificationReadUseCase(BaseUseCase):
    """Use case for marking a single notification read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationRequest) -> NotificationInfo:
        """Execute mark read flow.

        Raises:
            NotFoundError: If the caller has no such notification
        """
        notification = await self.notification_service.mark_read(
            NotificationId(request.notification_id), UserId(UUID(request.user_id))
        )
        return NotificationInfo.from_notification(notification)


class MarkAllReadRequest(ApiModel):
    """Mark all read request."""

    user_id: str


class MarkAllReadResponse(ApiModel):
    """Mark all read response."""

    updated: int


class MarkAllNotificationsReadUseCase(BaseUseCase):
    """Use case for clearing the unread badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkAllReadRequest) -> MarkAllReadResponse:
        updated = await self.notification_service.mark_all_read(
            UserId(UUID(request.user_id))
        )
        return MarkAllReadResponse(updated=updated)


class DeleteNotificationUseCase(BaseUseCase):
    """Use case for deleting one of the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationRequest) -> None:
        """Execute delete notification flow.

        Raises:
            NotFoundError: If the caller has no such notification
        """
        await self.notification_service.delete(
            NotificationId(request.notification_id), UserId(UUID(request.user_id))
        )
