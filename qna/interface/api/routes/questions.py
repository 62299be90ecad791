"""Question and answer-listing routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import Field

from qna.application.usecase.answer import (
    AnswerInfo,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
    PostAnswerRequest,
    PostAnswerUseCase,
)
from qna.application.usecase.base import ApiModel
from qna.application.usecase.pagination import Pagination
from qna.application.usecase.question import (
    AskQuestionRequest,
    AskQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionInfo,
)
from qna.domain.service import JWTService
from qna.domain.value import QuestionSortOrder
from qna.interface.api.auth import bearer_token, require_user_id

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class AskQuestionAPIRequest(ApiModel):
    """API request for asking a question."""

    title: str = Field(min_length=10, max_length=150)
    body: str = Field(min_length=1, max_length=30000)
    tags: list[str] = Field(min_length=1, max_length=5)


class PostAnswerAPIRequest(ApiModel):
    """API request for answering a question."""

    body: str = Field(min_length=1, max_length=30000)


@router.post("", response_model=QuestionInfo, status_code=status.HTTP_201_CREATED)
async def ask_question(
    request: AskQuestionAPIRequest,
    ask_question_use_case: FromDishka[AskQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> QuestionInfo:
    """Ask a question. Requires authentication."""
    user_id = require_user_id(jwt_service, token, "ask a question")
    return await ask_question_use_case.execute(
        AskQuestionRequest(
            title=request.title,
            body=request.body,
            tags=[tag.strip().lower() for tag in request.tags],
            author_id=user_id,
        )
    )


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    pagination: FromDishka[Pagination],
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
    tag: str | None = None,
    q: str | None = Query(default=None, max_length=200),
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
) -> ListQuestionsResponse:
    """List questions.

    Args:
        sort: newest, active, votes or unanswered
        tag: Only questions with this tag
        q: Case-insensitive substring of the title or body
        page: 1-based page number
        limit: Page size (capped)
    """
    return await list_questions_use_case.execute(
        ListQuestionsRequest(
            sort=sort,
            tag=tag.strip().lower() if tag else None,
            q=q,
            page=pagination.params(page=page, limit=limit),
        )
    )


@router.get("/{question_id}", response_model=QuestionInfo)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
) -> QuestionInfo:
    """Get a question. Counts as a view."""
    return await get_question_use_case.execute(
        GetQuestionRequest(question_id=question_id)
    )


@router.post(
    "/{question_id}/answers",
    response_model=AnswerInfo,
    status_code=status.HTTP_201_CREATED,
)
async def post_answer(
    question_id: UUID,
    request: PostAnswerAPIRequest,
    post_answer_use_case: FromDishka[PostAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> AnswerInfo:
    """Answer a question. Requires authentication."""
    user_id = require_user_id(jwt_service, token, "answer")
    return await post_answer_use_case.execute(
        PostAnswerRequest(question_id=question_id, body=request.body, author_id=user_id)
    )


@router.get("/{question_id}/answers", response_model=ListAnswersResponse)
async def list_answers(
    question_id: UUID,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
) -> ListAnswersResponse:
    """Answers to a question, accepted answer first, then by score."""
    return await list_answers_use_case.execute(
        ListAnswersRequest(question_id=question_id)
    )
