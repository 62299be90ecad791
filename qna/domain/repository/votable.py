"""Votable repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from qna.domain.model.target import Target


class VotableRepository(ABC):
    """Contract shared by repositories of entities that can receive votes.

    The vote ledger looks these up by target kind and never needs to know
    whether it is holding questions or answers.
    """

    @abstractmethod
    async def find_target(self, target_id: UUID) -> Optional[Target]:
        """Find the votable projection of an entity.

        Args:
            target_id: ID of the question or answer

        Returns:
            Target if found, None otherwise
        """
        pass

    @abstractmethod
    async def apply_score_delta(self, target_id: UUID, delta: int) -> int:
        """Atomically add ``delta`` to the entity's vote score.

        Args:
            target_id: ID of the question or answer
            delta: Signed amount to add

        Returns:
            The vote score after the increment
        """
        pass
