"""List answers use case."""

from uuid import UUID

from qna.application.usecase.base import ApiModel
from qna.application.usecase.answer.post_answer import AnswerInfo
from qna.domain.service import AnswerService
from qna.domain.value import QuestionId


class ListAnswersRequest(ApiModel):
    """List answers request."""

    question_id: UUID


class ListAnswersResponse(ApiModel):
    """Answers to a question, accepted answer first."""

    answers: list[AnswerInfo]


class ListAnswersUseCase:
    """Use case for listing the answers to a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        answers = await self.answer_service.list_for_question(
            QuestionId(request.question_id)
        )
        return ListAnswersResponse(
            answers=[AnswerInfo.from_answer(answer) for answer in answers]
        )
