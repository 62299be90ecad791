"""In-memory answer repository for testing."""

from typing import Optional
from uuid import UUID

from qna.domain.error import NotFoundError
from qna.domain.model import Answer, Target
from qna.domain.repository.answer import AnswerRepository
from qna.domain.value import AnswerId, QuestionId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_target(self, target_id: UUID) -> Optional[Target]:
        """Find the votable projection of an answer."""
        answer = self._answers.get(AnswerId(target_id))
        return answer.as_target() if answer else None

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find answers to a question, accepted first then by score."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        answers.sort(key=lambda a: a.created_at)
        answers.sort(key=lambda a: (a.is_accepted, a.vote_score), reverse=True)
        return answers

    async def save(self, answer: Answer) -> Answer:
        """Save or update an answer."""
        self._answers[answer.id] = answer
        return answer

    async def apply_score_delta(self, target_id: UUID, delta: int) -> int:
        """Add delta to the vote score."""
        answer = self._answers.get(AnswerId(target_id))
        if not answer:
            raise NotFoundError("Answer", str(target_id))
        updated = answer.model_copy(update={"vote_score": answer.vote_score + delta})
        self._answers[answer.id] = updated
        return updated.vote_score

    async def set_accepted(self, answer_id: AnswerId, accepted: bool) -> None:
        """Mark or unmark an answer as accepted."""
        answer = self._answers.get(answer_id)
        if answer:
            self._answers[answer_id] = answer.model_copy(
                update={"is_accepted": accepted}
            )
