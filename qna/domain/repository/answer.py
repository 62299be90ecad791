"""Answer repository interface."""

from abc import abstractmethod
from typing import List, Optional

from qna.domain.model.answer import Answer
from qna.domain.repository.votable import VotableRepository
from qna.domain.value import AnswerId, QuestionId


class AnswerRepository(VotableRepository):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find answers to a question.

        Accepted answer first, then by vote score (desc), then oldest first.

        Args:
            question_id: The question's ID

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        pass

    @abstractmethod
    async def set_accepted(self, answer_id: AnswerId, accepted: bool) -> None:
        """Mark or unmark an answer as accepted."""
        pass
