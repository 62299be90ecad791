"""Comment entity."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import CommentId, QuestionId, TargetKind, UserId


class Comment(DomainModel):
    """Short remark attached to a question or answer.

    Business rules:
    - Only the author may edit or delete a comment
    - Deletion is soft; deleted comments disappear from every listing
    - ``question_id`` is the thread the comment lives in, which for an
      answer comment is the answer's question
    """

    id: CommentId
    target_kind: TargetKind
    target_id: UUID
    question_id: QuestionId
    author_id: UserId
    body: str = Field(min_length=1, max_length=600)
    is_edited: bool = False
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
