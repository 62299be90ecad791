"""Question aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.model.target import Target
from qna.domain.value import AnswerId, QuestionId, TargetKind, UserId
from qna.domain.value.types import TagName


class Question(DomainModel):
    """Question aggregate root.

    ``vote_score`` is a denormalized counter (upvotes minus downvotes),
    maintained incrementally by the vote service.
    """

    id: QuestionId
    title: str = Field(min_length=10, max_length=150)
    body: str = Field(min_length=1, max_length=30000)
    author_id: UserId
    tags: list[TagName] = Field(min_length=1, max_length=5)
    vote_score: int = 0
    answer_count: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)
    accepted_answer_id: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    last_activity_at: datetime = Field(default_factory=datetime.now)

    def as_target(self) -> Target:
        """Project this question onto the votable target shape."""
        return Target(
            id=self.id,
            kind=TargetKind.QUESTION,
            author_id=self.author_id,
            vote_score=self.vote_score,
        )
