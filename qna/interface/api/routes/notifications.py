"""Notification routes.

Every route acts on the caller's own notifications.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status

from qna.application.usecase.notification import (
    DeleteNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkNotificationReadUseCase,
    NotificationInfo,
    NotificationRequest,
    UnreadCountRequest,
    UnreadCountResponse,
)
from qna.application.usecase.pagination import Pagination
from qna.domain.service import JWTService
from qna.interface.api.auth import bearer_token, require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    pagination: FromDishka[Pagination],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
    unread_only: bool = Query(default=False, alias="unreadOnly"),
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first."""
    user_id = require_user_id(jwt_service, token, "read notifications")
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=user_id,
            unread_only=unread_only,
            page=pagination.params(page=page, limit=limit),
        )
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> UnreadCountResponse:
    """Number of unread notifications."""
    user_id = require_user_id(jwt_service, token, "read notifications")
    return await get_unread_count_use_case.execute(UnreadCountRequest(user_id=user_id))


@router.put("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> MarkAllReadResponse:
    """Mark every notification read."""
    user_id = require_user_id(jwt_service, token, "update notifications")
    return await mark_all_read_use_case.execute(MarkAllReadRequest(user_id=user_id))


@router.put("/{notification_id}/read", response_model=NotificationInfo)
async def mark_read(
    notification_id: UUID,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> NotificationInfo:
    """Mark one notification read."""
    user_id = require_user_id(jwt_service, token, "update notifications")
    return await mark_read_use_case.execute(
        NotificationRequest(notification_id=notification_id, user_id=user_id)
    )


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: UUID,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> None:
    """Delete one notification."""
    user_id = require_user_id(jwt_service, token, "delete a notification")
    await delete_notification_use_case.execute(
        NotificationRequest(notification_id=notification_id, user_id=user_id)
    )
