"""Get user vote use case."""

from uuid import UUID

from qna.application.usecase.base import ApiModel, BaseUseCase
from qna.domain.service import VoteService
from qna.domain.value import TargetKind, UserId, VoteDirection


class GetUserVoteRequest(ApiModel):
    """Get user vote request."""

    target: UUID
    target_type: TargetKind
    user_id: str  # User ID from authenticated user


class GetUserVoteResponse(ApiModel):
    """The caller's current vote direction, if any."""

    vote_type: VoteDirection | None


class GetUserVoteUseCase(BaseUseCase):
    """Use case for reading the caller's vote on a target."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetUserVoteRequest) -> GetUserVoteResponse:
        vote = await self.vote_service.get_user_vote(
            UserId(UUID(request.user_id)), request.target, request.target_type
        )
        return GetUserVoteResponse(vote_type=vote.direction if vote else None)
