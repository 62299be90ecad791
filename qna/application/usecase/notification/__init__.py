"""Notification use cases."""

from .list_notifications import (
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationInfo,
    UnreadCountRequest,
    UnreadCountResponse,
)
from .mark_read import (
    DeleteNotificationUseCase,
    MarkAllNotificationsReadUseCase,
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkNotificationReadUseCase,
    NotificationRequest,
)

__all__ = [
    "DeleteNotificationUseCase",
    "GetUnreadCountUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadUseCase",
    "MarkAllReadRequest",
    "MarkAllReadResponse",
    "MarkNotificationReadUseCase",
    "NotificationInfo",
    "NotificationRequest",
    "UnreadCountRequest",
    "UnreadCountResponse",
]
