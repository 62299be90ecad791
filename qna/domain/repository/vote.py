"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from qna.domain.model.vote import Vote
from qna.domain.value import TargetKind, UserId, VoteDirection, VoteId, VoteTally


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_voter_and_target(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific target.

        Args:
            voter_id: The voter's ID
            target_kind: Kind of target (question or answer)
            target_id: ID of the target

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            ConflictError: If a vote already exists for this
                voter/target/kind combination (unique constraint)
        """
        pass

    @abstractmethod
    async def update_direction(
        self,
        vote_id: VoteId,
        current: VoteDirection,
        direction: VoteDirection,
    ) -> Optional[Vote]:
        """Flip a vote's direction in place.

        Only matches while the stored direction still equals ``current``, so a
        concurrent change is detected instead of overwritten.

        Args:
            vote_id: The vote to update
            current: Direction the caller read
            direction: New direction

        Returns:
            The updated vote, or None if it vanished or changed meanwhile
        """
        pass

    @abstractmethod
    async def delete(
        self, vote_id: VoteId, expected: Optional[VoteDirection] = None
    ) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete
            expected: Only delete while the stored direction equals this

        Returns:
            True if a vote was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def tally(self, target_kind: TargetKind, target_id: UUID) -> VoteTally:
        """Count up and down votes on a target.

        Args:
            target_kind: Kind of target (question or answer)
            target_id: ID of the target

        Returns:
            Up/down vote counts
        """
        pass

    @abstractmethod
    async def find_by_voter(
        self, voter_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Vote]:
        """Find votes cast by a user, newest first.

        Args:
            voter_id: The voter's ID
            limit: Maximum number of votes to return
            offset: Number of votes to skip

        Returns:
            List of votes
        """
        pass

    @abstractmethod
    async def count_by_voter(self, voter_id: UserId) -> int:
        """Count votes cast by a user."""
        pass
