"""List questions use case."""

import logfire

from qna.application.usecase.base import ApiModel, PageRequest, PaginationMeta
from qna.application.usecase.question.ask_question import QuestionInfo
from qna.domain.service import QuestionService
from qna.domain.value import QuestionSortOrder
from qna.domain.value.types import TagName


class ListQuestionsRequest(ApiModel):
    """List questions request."""

    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    tag: TagName | None = None  # Filter by tag name
    q: str | None = None  # Title/body substring
    page: PageRequest = PageRequest()


class ListQuestionsResponse(ApiModel):
    """List questions response."""

    questions: list[QuestionInfo]
    pagination: PaginationMeta


class ListQuestionsUseCase:
    """Use case for listing questions with filtering and pagination."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request with filters and pagination

        Returns:
            Page of questions matching criteria
        """
        with logfire.span(
            "list_questions.execute",
            sort=request.sort.value,
            page=request.page.page,
            limit=request.page.limit,
        ):
            search = request.q.strip() if request.q else None
            questions, total = await self.question_service.list_questions(
                sort=request.sort,
                tag=request.tag,
                search=search or None,
                limit=request.page.limit,
                offset=request.page.offset,
            )
            return ListQuestionsResponse(
                questions=[QuestionInfo.from_question(q) for q in questions],
                pagination=PaginationMeta.build(
                    total, request.page.page, request.page.limit
                ),
            )
