"""Ask question use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import Field

from qna.application.usecase.base import ApiModel
from qna.domain.model import Question
from qna.domain.service import QuestionService, UserService
from qna.domain.value import UserId
from qna.domain.value.types import TagName


class QuestionInfo(ApiModel):
    """Question as returned to clients."""

    id: str
    title: str
    body: str
    author: str
    tags: list[str]
    vote_score: int
    answer_count: int
    view_count: int
    accepted_answer: str | None
    created_at: datetime
    last_activity_at: datetime

    @classmethod
    def from_question(cls, question: Question) -> "QuestionInfo":
        return cls(
            id=str(question.id),
            title=question.title,
            body=question.body,
            author=str(question.author_id),
            tags=[tag.root for tag in question.tags],
            vote_score=question.vote_score,
            answer_count=question.answer_count,
            view_count=question.view_count,
            accepted_answer=str(question.accepted_answer_id)
            if question.accepted_answer_id
            else None,
            created_at=question.created_at,
            last_activity_at=question.last_activity_at,
        )


class AskQuestionRequest(ApiModel):
    """Ask question request."""

    title: str = Field(min_length=10, max_length=150)
    body: str = Field(min_length=1, max_length=30000)
    tags: list[TagName] = Field(min_length=1, max_length=5)
    author_id: str  # User ID from authenticated user


class AskQuestionUseCase:
    """Use case for posting a new question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize ask question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: AskQuestionRequest) -> QuestionInfo:
        """Execute ask question flow.

        Raises:
            NotFoundError: If the author doesn't exist
        """
        with logfire.span("ask_question.execute", author_id=request.author_id):
            author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
            question = await self.question_service.ask(
                author_id=author.id,
                title=request.title,
                body=request.body,
                tags=request.tags,
            )
            return QuestionInfo.from_question(question)
