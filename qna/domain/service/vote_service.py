"""Vote domain service."""

from dataclasses import dataclass
from typing import Mapping
from uuid import UUID

import logfire

from qna.domain.model import Vote
from qna.domain.repository import VotableRepository, VoteRepository
from qna.domain.value import (
    TargetKind,
    UserId,
    VoteDirection,
    VoteTally,
    VoteTransition,
)

from .base import Service
from .broadcaster import Broadcaster
from .user_service import UserService
from .vote_ledger import VoteLedger, VoteOutcome

VOTE_UPDATED = "vote_updated"


@dataclass(frozen=True)
class VoteResult:
    """Outcome of a vote after score and reputation were applied."""

    action: VoteTransition
    target_id: UUID
    target_kind: TargetKind
    vote: Vote | None
    vote_score: int
    new_reputation: int


class VoteService(Service):
    """Domain service for vote operations.

    Drives the ledger, then applies the reported deltas: score to the target
    first, reputation to the target's author second. The vote row is the only
    write with a durability guarantee; the follow-up increments have no
    compensating rollback.
    """

    def __init__(
        self,
        vote_ledger: VoteLedger,
        vote_repository: VoteRepository,
        targets: Mapping[TargetKind, VotableRepository],
        user_service: UserService,
        broadcaster: Broadcaster,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_ledger: Vote ledger
            vote_repository: Vote repository (read queries)
            targets: Repository for each kind of votable entity
            user_service: User domain service
            broadcaster: Real-time event publisher
        """
        self.vote_ledger = vote_ledger
        self.vote_repository = vote_repository
        self.targets = targets
        self.user_service = user_service
        self.broadcaster = broadcaster

    async def cast_vote(
        self,
        voter_id: UserId,
        target_id: UUID,
        target_kind: TargetKind | str,
        direction: VoteDirection | str,
    ) -> VoteResult:
        """Cast, flip or toggle off a vote and apply its consequences.

        Args:
            voter_id: User casting the vote
            target_id: Question or answer ID
            target_kind: Kind of target
            direction: Vote direction

        Returns:
            Transition with the new score and author reputation

        Raises:
            InvalidArgumentError: Self-vote or unknown kind/direction
            NotFoundError: If the target doesn't exist
            ConflictError: If the vote row kept colliding
        """
        with logfire.span(
            "vote_service.cast_vote", voter_id=str(voter_id), target_id=str(target_id)
        ):
            outcome = await self.vote_ledger.submit_vote(
                voter_id, target_id, target_kind, direction
            )
            return await self._apply(outcome)

    async def remove_vote(
        self,
        voter_id: UserId,
        target_id: UUID,
        target_kind: TargetKind | str,
    ) -> VoteResult:
        """Remove a voter's vote on a target.

        Raises:
            NotFoundError: If the target or vote doesn't exist
        """
        with logfire.span(
            "vote_service.remove_vote", voter_id=str(voter_id), target_id=str(target_id)
        ):
            outcome = await self.vote_ledger.retract_vote(
                voter_id, target_id, target_kind
            )
            return await self._apply(outcome)

    async def get_vote_stats(
        self, target_id: UUID, target_kind: TargetKind | str
    ) -> VoteTally:
        """Count up and down votes on an existing target.

        Raises:
            NotFoundError: If the target doesn't exist
        """
        target = await self.vote_ledger.load_target(target_id, target_kind)
        return await self.vote_repository.tally(target.kind, target.id)

    async def get_user_vote(
        self, voter_id: UserId, target_id: UUID, target_kind: TargetKind
    ) -> Vote | None:
        """Get a voter's current vote on a target, if any."""
        return await self.vote_repository.find_by_voter_and_target(
            voter_id, target_kind, target_id
        )

    async def list_user_votes(
        self, voter_id: UserId, limit: int, offset: int
    ) -> tuple[list[Vote], int]:
        """List a user's votes, newest first.

        Returns:
            Page of votes and the total count
        """
        votes = await self.vote_repository.find_by_voter(
            voter_id, limit=limit, offset=offset
        )
        total = await self.vote_repository.count_by_voter(voter_id)
        return votes, total

    async def _apply(self, outcome: VoteOutcome) -> VoteResult:
        target = outcome.target

        vote_score = await self.targets[target.kind].apply_score_delta(
            target.id, outcome.score_delta
        )

        if outcome.reputation_delta:
            new_reputation = await self.user_service.apply_reputation_delta(
                target.author_id, outcome.reputation_delta
            )
        else:
            author = await self.user_service.get_by_id(target.author_id)
            new_reputation = author.reputation

        await self._publish(
            VOTE_UPDATED,
            {
                "targetId": str(target.id),
                "targetType": target.kind.value,
                "voteScore": vote_score,
                "action": outcome.transition.value,
            },
        )

        return VoteResult(
            action=outcome.transition,
            target_id=target.id,
            target_kind=target.kind,
            vote=outcome.vote,
            vote_score=vote_score,
            new_reputation=new_reputation,
        )

    async def _publish(self, topic: str, payload: dict) -> None:
        """Fire-and-forget: a failed publish never fails the vote."""
        try:
            await self.broadcaster.publish(topic, payload)
        except Exception as e:
            logfire.warn("Broadcast failed", topic=topic, error=str(e))
