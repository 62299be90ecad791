"""Domain value objects for the Q&A forum."""

from qna.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    UserId,
    VoteId,
)
from qna.domain.value.types import (
    NotificationType,
    QuestionSortOrder,
    TagName,
    TargetKind,
    Username,
    VoteDirection,
    VoteTally,
    VoteTransition,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "VoteId",
    "CommentId",
    "NotificationId",
    # Types
    "NotificationType",
    "QuestionSortOrder",
    "TagName",
    "TargetKind",
    "Username",
    "VoteDirection",
    "VoteTally",
    "VoteTransition",
]
