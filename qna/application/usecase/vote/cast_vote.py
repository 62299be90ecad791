"""Cast vote use case."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from qna.application.usecase.base import ApiModel, BaseUseCase
from qna.domain.model import Vote
from qna.domain.service import VoteService
from qna.domain.value import TargetKind, UserId, VoteDirection, VoteTransition


class VoteInfo(ApiModel):
    """Vote as returned to clients."""

    id: str
    voter: str
    target: str
    target_type: TargetKind
    vote_type: VoteDirection
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteInfo":
        return cls(
            id=str(vote.id),
            voter=str(vote.voter_id),
            target=str(vote.target_id),
            target_type=vote.target_kind,
            vote_type=vote.direction,
            created_at=vote.created_at,
            updated_at=vote.updated_at,
        )


class CastVoteRequest(ApiModel):
    """Cast vote request.

    ``target_type`` and ``vote_type`` stay plain strings so an unknown value
    is rejected by the vote ledger with the same error as any other caller.
    """

    target: UUID
    target_type: str = Field(min_length=1)
    vote_type: str = Field(min_length=1)
    user_id: str  # User ID from authenticated user


class CastVoteResponse(ApiModel):
    """Cast vote response."""

    action: VoteTransition
    vote: VoteInfo | None
    new_reputation: int
    vote_score: int


class CastVoteUseCase(BaseUseCase):
    """Use case for casting, flipping or toggling off a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Transition, resulting vote, target score and author reputation

        Raises:
            InvalidArgumentError: Self-vote or unknown target/vote type
            NotFoundError: If the target doesn't exist
            ConflictError: If the vote kept colliding with a concurrent one
        """
        result = await self.vote_service.cast_vote(
            voter_id=UserId(UUID(request.user_id)),
            target_id=request.target,
            target_kind=request.target_type,
            direction=request.vote_type,
        )

        return CastVoteResponse(
            action=result.action,
            vote=VoteInfo.from_vote(result.vote) if result.vote else None,
            new_reputation=result.new_reputation,
            vote_score=result.vote_score,
        )
