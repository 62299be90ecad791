"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from qna.domain.error import ConflictError
from qna.domain.model.vote import Vote
from qna.domain.repository.vote import VoteRepository
from qna.domain.value import TargetKind, UserId, VoteDirection, VoteId, VoteTally


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_voter_and_target(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by voter and target."""
        for vote in self._votes:
            if (
                vote.voter_id == voter_id
                and vote.target_kind == target_kind
                and vote.target_id == target_id
            ):
                return vote
        return None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            ConflictError: If the voter already voted on the target
        """
        existing = await self.find_by_voter_and_target(
            vote.voter_id, vote.target_kind, vote.target_id
        )
        if existing:
            raise ConflictError(
                "vote", f"{vote.voter_id}/{vote.target_kind.value}/{vote.target_id}"
            )

        self._votes.append(vote)
        return vote

    async def update_direction(
        self,
        vote_id: VoteId,
        current: VoteDirection,
        direction: VoteDirection,
    ) -> Optional[Vote]:
        """Flip a vote's direction if it still has the direction we read."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id and vote.direction == current:
                updated = vote.model_copy(
                    update={"direction": direction, "updated_at": datetime.now()}
                )
                self._votes[i] = updated
                return updated
        return None

    async def delete(
        self, vote_id: VoteId, expected: Optional[VoteDirection] = None
    ) -> bool:
        """Delete a vote by ID."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id and (expected is None or vote.direction == expected):
                self._votes.pop(i)
                return True
        return False

    async def tally(self, target_kind: TargetKind, target_id: UUID) -> VoteTally:
        """Count up and down votes on a target."""
        votes = [
            v
            for v in self._votes
            if v.target_kind == target_kind and v.target_id == target_id
        ]
        return VoteTally(
            upvotes=sum(1 for v in votes if v.direction == VoteDirection.UP),
            downvotes=sum(1 for v in votes if v.direction == VoteDirection.DOWN),
        )

    async def find_by_voter(
        self, voter_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Vote]:
        """Find votes cast by a user, newest first."""
        votes = [v for v in self._votes if v.voter_id == voter_id]
        votes.sort(key=lambda v: v.created_at, reverse=True)
        return votes[offset : offset + limit]

    async def count_by_voter(self, voter_id: UserId) -> int:
        """Count votes cast by a user."""
        return sum(1 for v in self._votes if v.voter_id == voter_id)
