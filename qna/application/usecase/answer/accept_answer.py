"""Accept and unaccept answer use cases."""

from uuid import UUID

from qna.application.usecase.base import ApiModel
from qna.application.usecase.answer.post_answer import AnswerInfo
from qna.domain.service import AnswerService
from qna.domain.value import AnswerId, UserId


class AcceptAnswerRequest(ApiModel):
    """Accept or unaccept answer request."""

    answer_id: UUID
    user_id: str  # User ID from authenticated user


class AcceptAnswerUseCase:
    """Use case for the question author accepting an answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: AcceptAnswerRequest) -> AnswerInfo:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If the answer doesn't exist
            NotAuthorizedError: If the caller didn't ask the question
            InvalidArgumentError: If the answer is already accepted
        """
        answer = await self.answer_service.accept(
            AnswerId(request.answer_id), UserId(UUID(request.user_id))
        )
        return AnswerInfo.from_answer(answer)


class UnacceptAnswerUseCase:
    """Use case for the question author withdrawing an acceptance."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: AcceptAnswerRequest) -> AnswerInfo:
        """Execute unaccept answer flow.

        Raises:
            NotFoundError: If the answer doesn't exist
            NotAuthorizedError: If the caller didn't ask the question
            InvalidArgumentError: If the answer isn't accepted
        """
        answer = await self.answer_service.unaccept(
            AnswerId(request.answer_id), UserId(UUID(request.user_id))
        )
        return AnswerInfo.from_answer(answer)
