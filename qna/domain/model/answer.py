"""Answer entity."""

from datetime import datetime

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.model.target import Target
from qna.domain.value import AnswerId, QuestionId, TargetKind, UserId


class Answer(DomainModel):
    """Answer to a question."""

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    body: str = Field(min_length=1, max_length=30000)
    vote_score: int = 0
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    def as_target(self) -> Target:
        """Project this answer onto the votable target shape."""
        return Target(
            id=self.id,
            kind=TargetKind.ANSWER,
            author_id=self.author_id,
            vote_score=self.vote_score,
        )
