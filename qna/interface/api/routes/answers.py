"""Answer acceptance routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from qna.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    AnswerInfo,
    UnacceptAnswerUseCase,
)
from qna.domain.service import JWTService
from qna.interface.api.auth import bearer_token, require_user_id

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


@router.post("/{answer_id}/accept", response_model=AnswerInfo)
async def accept_answer(
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> AnswerInfo:
    """Accept an answer. Only the question author may accept."""
    user_id = require_user_id(jwt_service, token, "accept an answer")
    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(answer_id=answer_id, user_id=user_id)
    )


@router.delete("/{answer_id}/accept", response_model=AnswerInfo)
async def unaccept_answer(
    answer_id: UUID,
    unaccept_answer_use_case: FromDishka[UnacceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> AnswerInfo:
    """Withdraw acceptance of an answer. Only the question author may."""
    user_id = require_user_id(jwt_service, token, "unaccept an answer")
    return await unaccept_answer_use_case.execute(
        AcceptAnswerRequest(answer_id=answer_id, user_id=user_id)
    )
