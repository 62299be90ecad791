"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.error import NotFoundError
from qna.domain.model import Answer, Target
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionId
from qna.persistence.mappers import answer_to_dict, row_to_answer
from qna.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_target(self, target_id: UUID) -> Optional[Target]:
        """Find the votable projection of an answer."""
        answer = await self.find_by_id(AnswerId(target_id))
        return answer.as_target() if answer else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find answers to a question, accepted first then by score."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(
                desc(answers_table.c.is_accepted),
                desc(answers_table.c.vote_score),
                answers_table.c.created_at,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        answer_dict = answer_to_dict(answer)
        existing = await self.find_by_id(answer.id)

        if existing:
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer.id)
                .values(**answer_dict)
            )
        else:
            stmt = insert(answers_table).values(**answer_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def apply_score_delta(self, target_id: UUID, delta: int) -> int:
        """Atomically add delta to the vote score.

        Raises:
            NotFoundError: If the answer doesn't exist
        """
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == target_id)
            .values(vote_score=answers_table.c.vote_score + delta)
            .returning(answers_table.c.vote_score)
        )
        result = await self.session.execute(stmt)
        vote_score = result.scalar_one_or_none()
        await self.session.flush()
        if vote_score is None:
            raise NotFoundError("Answer", str(target_id))
        return vote_score

    async def set_accepted(self, answer_id: AnswerId, accepted: bool) -> None:
        """Mark or unmark an answer as accepted."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=accepted)
        )
        await self.session.execute(stmt)
        await self.session.flush()
