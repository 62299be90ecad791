"""Post answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from qna.application.usecase.base import ApiModel
from qna.domain.model import Answer
from qna.domain.service import AnswerService, UserService
from qna.domain.value import QuestionId, UserId


class AnswerInfo(ApiModel):
    """Answer as returned to clients."""

    id: str
    question: str
    author: str
    body: str
    vote_score: int
    is_accepted: bool
    created_at: datetime

    @classmethod
    def from_answer(cls, answer: Answer) -> "AnswerInfo":
        return cls(
            id=str(answer.id),
            question=str(answer.question_id),
            author=str(answer.author_id),
            body=answer.body,
            vote_score=answer.vote_score,
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
        )


class PostAnswerRequest(ApiModel):
    """Post answer request."""

    question_id: UUID
    body: str = Field(min_length=1, max_length=30000)
    author_id: str  # User ID from authenticated user


class PostAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize post answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: PostAnswerRequest) -> AnswerInfo:
        """Execute post answer flow.

        Raises:
            NotFoundError: If the author or question doesn't exist
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        answer = await self.answer_service.post_answer(
            question_id=QuestionId(request.question_id),
            author_id=author.id,
            body=request.body,
        )
        return AnswerInfo.from_answer(answer)
