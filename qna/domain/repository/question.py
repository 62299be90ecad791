"""Question repository interface."""

from abc import abstractmethod
from typing import List, Optional

from qna.domain.model.question import Question
from qna.domain.repository.votable import VotableRepository
from qna.domain.value import AnswerId, QuestionId, QuestionSortOrder
from qna.domain.value.types import TagName


class QuestionRepository(VotableRepository):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination.

        Args:
            sort: Sort order
            tag: Only questions carrying this tag
            search: Case-insensitive substring matched against title and body
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        unanswered_only: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def increment_view_count(self, question_id: QuestionId) -> None:
        """Atomically increment view count by 1."""
        pass

    @abstractmethod
    async def increment_answer_count(self, question_id: QuestionId) -> None:
        """Atomically increment answer count by 1 and bump last activity."""
        pass

    @abstractmethod
    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Record which answer (if any) the question author accepted."""
        pass
