"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from pydantic import Field

from qna.application.usecase.base import ApiModel
from qna.application.usecase.pagination import Pagination
from qna.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetUserVoteRequest,
    GetUserVoteResponse,
    GetUserVoteUseCase,
    GetVoteStatsRequest,
    GetVoteStatsResponse,
    GetVoteStatsUseCase,
    ListUserVotesRequest,
    ListUserVotesResponse,
    ListUserVotesUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
)
from qna.domain.service import JWTService
from qna.domain.value import TargetKind
from qna.interface.api.auth import bearer_token, require_user_id

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(ApiModel):
    """API request for casting a vote on any target."""

    target: UUID
    target_type: str = Field(min_length=1)
    vote_type: str = Field(min_length=1)


class TargetVoteAPIRequest(ApiModel):
    """API request for casting a vote on a target named in the path."""

    vote_type: str = Field(min_length=1)


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> CastVoteResponse:
    """Cast, flip or toggle off a vote.

    Voting the same direction twice removes the vote; voting the opposite
    direction flips it. Requires authentication.
    """
    user_id = require_user_id(jwt_service, token, "vote")
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            target=request.target,
            target_type=request.target_type,
            vote_type=request.vote_type,
            user_id=user_id,
        )
    )


@router.get("/user/{user_id}", response_model=ListUserVotesResponse)
async def list_user_votes(
    user_id: UUID,
    list_user_votes_use_case: FromDishka[ListUserVotesUseCase],
    pagination: FromDishka[Pagination],
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
) -> ListUserVotesResponse:
    """List votes cast by a user, newest first."""
    return await list_user_votes_use_case.execute(
        ListUserVotesRequest(
            user_id=str(user_id), page=pagination.params(page=page, limit=limit)
        )
    )


@router.post("/{target_type}/{target_id}", response_model=CastVoteResponse)
async def vote_on_target(
    target_type: TargetKind,
    target_id: UUID,
    request: TargetVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> CastVoteResponse:
    """Vote on a question or answer. Requires authentication."""
    user_id = require_user_id(jwt_service, token, "vote")
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            target=target_id,
            target_type=target_type.value,
            vote_type=request.vote_type,
            user_id=user_id,
        )
    )


@router.delete("/{target_type}/{target_id}", response_model=RemoveVoteResponse)
async def remove_vote(
    target_type: TargetKind,
    target_id: UUID,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> RemoveVoteResponse:
    """Retract the caller's vote on a question or answer.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, token, "remove a vote")
    return await remove_vote_use_case.execute(
        RemoveVoteRequest(target=target_id, target_type=target_type, user_id=user_id)
    )


@router.get("/{target_type}/{target_id}", response_model=GetVoteStatsResponse)
async def get_vote_stats(
    target_type: TargetKind,
    target_id: UUID,
    get_vote_stats_use_case: FromDishka[GetVoteStatsUseCase],
) -> GetVoteStatsResponse:
    """Up and down vote counts for a question or answer."""
    return await get_vote_stats_use_case.execute(
        GetVoteStatsRequest(target=target_id, target_type=target_type)
    )


@router.get("/{target_type}/{target_id}/user", response_model=GetUserVoteResponse)
async def get_user_vote(
    target_type: TargetKind,
    target_id: UUID,
    get_user_vote_use_case: FromDishka[GetUserVoteUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> GetUserVoteResponse:
    """The caller's current vote on a question or answer, if any.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, token, "read your vote")
    return await get_user_vote_use_case.execute(
        GetUserVoteRequest(target=target_id, target_type=target_type, user_id=user_id)
    )
