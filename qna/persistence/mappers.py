"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from qna.domain.model import Answer, Comment, Notification, Question, User, Vote
from qna.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    TargetKind,
    UserId,
    VoteDirection,
    VoteId,
)
from qna.domain.value.types import TagName, Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row.get("email"),
        bio=row.get("bio"),
        reputation=row["reputation"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        tags=[TagName(tag) for tag in row["tags"]],
        vote_score=row["vote_score"],
        answer_count=row["answer_count"],
        view_count=row["view_count"],
        accepted_answer_id=AnswerId(_uuid(row["accepted_answer_id"]))
        if row.get("accepted_answer_id")
        else None,
        created_at=row["created_at"],
        last_activity_at=row["last_activity_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    TagName is a RootValueObject, so model_dump() yields plain strings.
    """
    return question.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        vote_score=row["vote_score"],
        is_accepted=row["is_accepted"],
        created_at=row["created_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        voter_id=UserId(_uuid(row["voter_id"])),
        target_kind=TargetKind(row["target_kind"]),
        target_id=_uuid(row["target_id"]),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Enum columns are declared with plain string labels, so pass values.
    """
    data = vote.model_dump()
    data["target_kind"] = vote.target_kind.value
    data["direction"] = vote.direction.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        target_kind=TargetKind(row["target_kind"]),
        target_id=_uuid(row["target_id"]),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        is_edited=row["is_edited"],
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["target_kind"] = comment.target_kind.value
    return data


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value else None


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    sender_id = _optional_uuid(row.get("sender_id"))
    question_id = _optional_uuid(row.get("question_id"))
    answer_id = _optional_uuid(row.get("answer_id"))
    comment_id = _optional_uuid(row.get("comment_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(sender_id) if sender_id else None,
        type=NotificationType(row["type"]),
        message=row["message"],
        question_id=QuestionId(question_id) if question_id else None,
        answer_id=AnswerId(answer_id) if answer_id else None,
        comment_id=CommentId(comment_id) if comment_id else None,
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
