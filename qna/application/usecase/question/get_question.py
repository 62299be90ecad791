"""Get question use case."""

from uuid import UUID

from qna.application.usecase.base import ApiModel
from qna.application.usecase.question.ask_question import QuestionInfo
from qna.domain.service import QuestionService
from qna.domain.value import QuestionId


class GetQuestionRequest(ApiModel):
    """Get question request."""

    question_id: UUID


class GetQuestionUseCase:
    """Use case for reading a question; each read counts as a view."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: GetQuestionRequest) -> QuestionInfo:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        question = await self.question_service.view(QuestionId(request.question_id))
        return QuestionInfo.from_question(question)
