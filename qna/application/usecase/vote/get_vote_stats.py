"""Get vote stats use case."""

from uuid import UUID

from qna.application.usecase.base import ApiModel, BaseUseCase
from qna.domain.service import VoteService
from qna.domain.value import TargetKind


class GetVoteStatsRequest(ApiModel):
    """Get vote stats request."""

    target: UUID
    target_type: TargetKind


class GetVoteStatsResponse(ApiModel):
    """Up/down vote counts for a target."""

    upvotes: int
    downvotes: int
    total: int


class GetVoteStatsUseCase(BaseUseCase):
    """Use case for counting votes on a question or answer."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteStatsRequest) -> GetVoteStatsResponse:
        """Execute get vote stats flow.

        Raises:
            NotFoundError: If the target doesn't exist
        """
        tally = await self.vote_service.get_vote_stats(
            request.target, request.target_type
        )
        return GetVoteStatsResponse(
            upvotes=tally.upvotes, downvotes=tally.downvotes, total=tally.total
        )
