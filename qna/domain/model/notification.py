"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)


class Notification(DomainModel):
    """Something that happened to a user's content.

    Stored per recipient and pushed to their live connections when created.
    """

    id: NotificationId
    recipient_id: UserId
    sender_id: Optional[UserId] = None
    type: NotificationType
    message: str = Field(min_length=1, max_length=500)
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    comment_id: Optional[CommentId] = None
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
