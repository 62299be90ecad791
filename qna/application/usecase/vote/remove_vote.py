"""Remove vote use case."""

from uuid import UUID

from qna.application.usecase.base import ApiModel, BaseUseCase
from qna.domain.service import VoteService
from qna.domain.value import TargetKind, UserId, VoteTransition


class RemoveVoteRequest(ApiModel):
    """Remove vote request."""

    target: UUID
    target_type: TargetKind
    user_id: str  # User ID from authenticated user


class RemoveVoteResponse(ApiModel):
    """Remove vote response."""

    action: VoteTransition
    new_reputation: int
    vote_score: int


class RemoveVoteUseCase(BaseUseCase):
    """Use case for retracting a vote from a question or answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Raises:
            NotFoundError: If the target or the vote doesn't exist
        """
        result = await self.vote_service.remove_vote(
            voter_id=UserId(UUID(request.user_id)),
            target_id=request.target,
            target_kind=request.target_type,
        )
        return RemoveVoteResponse(
            action=result.action,
            new_reputation=result.new_reputation,
            vote_score=result.vote_score,
        )
