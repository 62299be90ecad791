"""In-memory question repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from qna.domain.error import NotFoundError
from qna.domain.model import Question, Target
from qna.domain.repository.question import QuestionRepository
from qna.domain.value import AnswerId, QuestionId, QuestionSortOrder
from qna.domain.value.types import TagName


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_target(self, target_id: UUID) -> Optional[Target]:
        """Find the votable projection of a question."""
        question = self._questions.get(QuestionId(target_id))
        return question.as_target() if question else None

    def _matching(
        self,
        tag: Optional[TagName],
        search: Optional[str],
        unanswered_only: bool,
    ) -> list[Question]:
        questions = list(self._questions.values())
        if tag:
            questions = [q for q in questions if tag in q.tags]
        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.body.lower()
            ]
        if unanswered_only:
            questions = [q for q in questions if q.answer_count == 0]
        return questions

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination."""
        questions = self._matching(
            tag, search, unanswered_only=sort == QuestionSortOrder.UNANSWERED
        )

        if sort == QuestionSortOrder.ACTIVE:
            questions.sort(key=lambda q: q.last_activity_at, reverse=True)
        elif sort == QuestionSortOrder.VOTES:
            questions.sort(key=lambda q: (q.vote_score, q.created_at), reverse=True)
        else:
            questions.sort(key=lambda q: q.created_at, reverse=True)

        return questions[offset : offset + limit]

    async def count(
        self,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        unanswered_only: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        return len(self._matching(tag, search, unanswered_only))

    async def save(self, question: Question) -> Question:
        """Save or update a question."""
        self._questions[question.id] = question
        return question

    def _update(self, question_id: QuestionId, **changes) -> Question:
        question = self._questions.get(question_id)
        if not question:
            raise NotFoundError("Question", str(question_id))
        updated = question.model_copy(update=changes)
        self._questions[question_id] = updated
        return updated

    async def apply_score_delta(self, target_id: UUID, delta: int) -> int:
        """Add delta to the vote score and bump last activity."""
        question = self._questions.get(QuestionId(target_id))
        if not question:
            raise NotFoundError("Question", str(target_id))
        updated = self._update(
            question.id,
            vote_score=question.vote_score + delta,
            last_activity_at=datetime.now(),
        )
        return updated.vote_score

    async def increment_view_count(self, question_id: QuestionId) -> None:
        """Increment view count by 1."""
        question = self._questions.get(question_id)
        if question:
            self._update(question_id, view_count=question.view_count + 1)

    async def increment_answer_count(self, question_id: QuestionId) -> None:
        """Increment answer count by 1 and bump last activity."""
        question = self._questions.get(question_id)
        if question:
            self._update(
                question_id,
                answer_count=question.answer_count + 1,
                last_activity_at=datetime.now(),
            )

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Record which answer (if any) the question author accepted."""
        if question_id in self._questions:
            self._update(
                question_id,
                accepted_answer_id=answer_id,
                last_activity_at=datetime.now(),
            )
