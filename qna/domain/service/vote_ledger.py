"""Vote ledger.

Owns the (voter, target, target kind) -> direction mapping. Every submission
resolves to exactly one of three transitions against the stored row:

    no vote             -> created
    same direction      -> removed   (toggle off)
    opposite direction  -> updated   (flip in place)

The ledger reports the score and reputation deltas that go with the
transition; applying them is the caller's job.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Awaitable, Callable, Mapping, TypeVar
from uuid import UUID, uuid4

import logfire

from qna.domain.error import ConflictError, InvalidArgumentError, NotFoundError
from qna.domain.model import Target, Vote
from qna.domain.repository import VotableRepository, VoteRepository
from qna.domain.value import (
    TargetKind,
    UserId,
    VoteDirection,
    VoteId,
    VoteTransition,
)

from .base import Service
from .reputation import ReputationTable

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class VoteOutcome:
    """Result of a ledger operation.

    ``direction`` is the vote's direction after the transition, or the
    direction of the deleted vote for ``removed``. Replaying ``score_delta``
    and ``reputation_delta`` from zero reproduces the stored state.
    """

    transition: VoteTransition
    target: Target
    direction: VoteDirection
    previous_direction: VoteDirection | None
    vote: Vote | None
    score_delta: int
    reputation_delta: int


def decide_transition(
    existing: Vote | None, direction: VoteDirection
) -> VoteTransition:
    """Pick the transition for a submission against the stored vote."""
    if existing is None:
        return VoteTransition.CREATED
    if existing.direction == direction:
        return VoteTransition.REMOVED
    return VoteTransition.UPDATED


def score_delta(
    transition: VoteTransition,
    direction: VoteDirection,
    previous: VoteDirection | None = None,
) -> int:
    """Change to a target's vote score caused by a transition.

    Args:
        transition: What happened to the vote row
        direction: Direction after the transition, or of the removed vote
        previous: Direction before the transition (``updated`` only)
    """
    if transition is VoteTransition.CREATED:
        return direction.score
    if transition is VoteTransition.REMOVED:
        return -direction.score
    if previous is None:
        raise ValueError("Updated transition requires the previous direction")
    return direction.score - previous.score


def _coerce(enum_type: type[E], value: object, field: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        raise InvalidArgumentError(f"Invalid {field}: {value!r}") from None


class VoteLedger(Service):
    """Domain service deciding and persisting vote transitions."""

    # A duplicate-key collision means another request created the row between
    # our read and our insert; one re-read is enough to see it.
    max_conflict_retries = 1

    def __init__(
        self,
        vote_repository: VoteRepository,
        targets: Mapping[TargetKind, VotableRepository],
        reputation: ReputationTable,
    ) -> None:
        """Initialize vote ledger.

        Args:
            vote_repository: Vote repository
            targets: Repository for each kind of votable entity
            reputation: Reputation point table
        """
        self.vote_repository = vote_repository
        self.targets = targets
        self.reputation = reputation

    async def load_target(
        self, target_id: UUID, target_kind: TargetKind | str
    ) -> Target:
        """Look up a votable target.

        Raises:
            InvalidArgumentError: If the kind is unknown
            NotFoundError: If no target of that kind exists
        """
        kind = _coerce(TargetKind, target_kind, "target kind")
        target = await self.targets[kind].find_target(target_id)
        if target is None:
            logfire.warn(
                "Vote on non-existent target", target_id=str(target_id), kind=kind.value
            )
            raise NotFoundError(kind.value.capitalize(), str(target_id))
        return target

    async def submit_vote(
        self,
        voter_id: UserId,
        target_id: UUID,
        target_kind: TargetKind | str,
        direction: VoteDirection | str,
    ) -> VoteOutcome:
        """Create, flip or remove a voter's vote on a target.

        Args:
            voter_id: User casting the vote
            target_id: Question or answer ID
            target_kind: Kind of target
            direction: Requested vote direction

        Returns:
            The transition that occurred and its deltas

        Raises:
            InvalidArgumentError: Self-vote, or unknown kind/direction
            NotFoundError: If the target doesn't exist
            ConflictError: If the unique constraint still collides after a retry
        """
        direction = _coerce(VoteDirection, direction, "vote direction")
        target = await self.load_target(target_id, target_kind)

        with logfire.span(
            "vote_ledger.submit_vote",
            voter_id=str(voter_id),
            target_id=str(target.id),
            kind=target.kind.value,
            direction=direction.value,
        ):
            if target.author_id == voter_id:
                logfire.warn(
                    "Self-vote rejected", voter_id=str(voter_id), target_id=str(target.id)
                )
                raise InvalidArgumentError("Cannot vote on your own content")

            outcome = await self._retry_on_conflict(
                lambda: self._apply(voter_id, target, direction)
            )
            logfire.info(
                "Vote submitted",
                transition=outcome.transition.value,
                score_delta=outcome.score_delta,
                reputation_delta=outcome.reputation_delta,
            )
            return outcome

    async def retract_vote(
        self,
        voter_id: UserId,
        target_id: UUID,
        target_kind: TargetKind | str,
    ) -> VoteOutcome:
        """Delete a voter's vote on a target regardless of direction.

        Raises:
            NotFoundError: If the target or the vote doesn't exist
        """
        target = await self.load_target(target_id, target_kind)

        with logfire.span(
            "vote_ledger.retract_vote",
            voter_id=str(voter_id),
            target_id=str(target.id),
            kind=target.kind.value,
        ):
            return await self._retry_on_conflict(lambda: self._retract(voter_id, target))

    async def _retry_on_conflict(self, operation: Callable[[], Awaitable[T]]) -> T:
        attempt = 0
        while True:
            try:
                return await operation()
            except ConflictError as e:
                if attempt >= self.max_conflict_retries:
                    logfire.error(
                        "Vote conflict persisted after retry",
                        attempts=attempt + 1,
                        error=str(e),
                    )
                    raise
                attempt += 1
                logfire.warn("Vote conflict, retrying", attempt=attempt, error=str(e))

    async def _apply(
        self, voter_id: UserId, target: Target, direction: VoteDirection
    ) -> VoteOutcome:
        existing = await self.vote_repository.find_by_voter_and_target(
            voter_id, target.kind, target.id
        )
        transition = decide_transition(existing, direction)

        if existing is None:
            now = datetime.now()
            vote = await self.vote_repository.save(
                Vote(
                    id=VoteId(uuid4()),
                    voter_id=voter_id,
                    target_kind=target.kind,
                    target_id=target.id,
                    direction=direction,
                    created_at=now,
                    updated_at=now,
                )
            )
            return self._outcome(transition, target, direction, None, vote)

        if transition is VoteTransition.REMOVED:
            await self._delete(existing, target)
            return self._outcome(transition, target, direction, None, None)

        updated = await self.vote_repository.update_direction(
            existing.id, existing.direction, direction
        )
        if updated is None:
            # Row changed or vanished since we read it
            raise ConflictError("vote", self._key(voter_id, target))
        return self._outcome(transition, target, direction, existing.direction, updated)

    async def _retract(self, voter_id: UserId, target: Target) -> VoteOutcome:
        existing = await self.vote_repository.find_by_voter_and_target(
            voter_id, target.kind, target.id
        )
        if existing is None:
            logfire.info(
                "No vote to retract", voter_id=str(voter_id), target_id=str(target.id)
            )
            raise NotFoundError("Vote", self._key(voter_id, target))

        await self._delete(existing, target)
        return self._outcome(
            VoteTransition.REMOVED, target, existing.direction, None, None
        )

    async def _delete(self, existing: Vote, target: Target) -> None:
        deleted = await self.vote_repository.delete(existing.id, existing.direction)
        if not deleted:
            raise ConflictError("vote", self._key(existing.voter_id, target))

    def _outcome(
        self,
        transition: VoteTransition,
        target: Target,
        direction: VoteDirection,
        previous: VoteDirection | None,
        vote: Vote | None,
    ) -> VoteOutcome:
        return VoteOutcome(
            transition=transition,
            target=target,
            direction=direction,
            previous_direction=previous,
            vote=vote,
            score_delta=score_delta(transition, direction, previous),
            reputation_delta=self.reputation.vote_delta(
                transition, target.kind, direction, previous
            ),
        )

    @staticmethod
    def _key(voter_id: UserId, target: Target) -> str:
        return f"{voter_id}/{target.kind.value}/{target.id}"
