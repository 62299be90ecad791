"""PostgreSQL implementation of Question repository."""

from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.error import NotFoundError
from qna.domain.model import Question, Target
from qna.domain.repository import QuestionRepository
from qna.domain.value import AnswerId, QuestionId, QuestionSortOrder
from qna.domain.value.types import TagName
from qna.persistence.mappers import question_to_dict, row_to_question
from qna.persistence.tables import questions_table

LIKE_ESCAPE = "\\"


def contains_pattern(search: str) -> str:
    """Build a LIKE pattern matching ``search`` literally anywhere in a column."""
    escaped = (
        search.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_question(row._asdict()) if row else None

    async def find_target(self, target_id: UUID) -> Optional[Target]:
        """Find the votable projection of a question."""
        question = await self.find_by_id(QuestionId(target_id))
        return question.as_target() if question else None

    def _filtered(
        self,
        stmt,
        tag: Optional[TagName],
        search: Optional[str],
        unanswered_only: bool,
    ):
        if tag:
            stmt = stmt.where(questions_table.c.tags.any(tag.root))
        if search:
            pattern = contains_pattern(search)
            stmt = stmt.where(
                or_(
                    questions_table.c.title.ilike(pattern, escape=LIKE_ESCAPE),
                    questions_table.c.body.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        if unanswered_only:
            stmt = stmt.where(questions_table.c.answer_count == 0)
        return stmt

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            tag=tag.root if tag else None,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(
                select(questions_table),
                tag,
                search,
                unanswered_only=sort == QuestionSortOrder.UNANSWERED,
            )

            if sort == QuestionSortOrder.ACTIVE:
                stmt = stmt.order_by(desc(questions_table.c.last_activity_at))
            elif sort == QuestionSortOrder.VOTES:
                stmt = stmt.order_by(
                    desc(questions_table.c.vote_score),
                    desc(questions_table.c.created_at),
                )
            else:
                stmt = stmt.order_by(desc(questions_table.c.created_at))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            questions = [row_to_question(row._asdict()) for row in result.fetchall()]
            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(
        self,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        unanswered_only: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        stmt = self._filtered(
            select(func.count()).select_from(questions_table),
            tag,
            search,
            unanswered_only,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        question_dict = question_to_dict(question)
        existing = await self.find_by_id(question.id)

        if existing:
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == question.id)
                .values(**question_dict)
            )
        else:
            stmt = insert(questions_table).values(**question_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def apply_score_delta(self, target_id: UUID, delta: int) -> int:
        """Atomically add delta to the vote score and bump last activity.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == target_id)
            .values(
                vote_score=questions_table.c.vote_score + delta,
                last_activity_at=func.now(),
            )
            .returning(questions_table.c.vote_score)
        )
        result = await self.session.execute(stmt)
        vote_score = result.scalar_one_or_none()
        await self.session.flush()
        if vote_score is None:
            raise NotFoundError("Question", str(target_id))
        return vote_score

    async def increment_view_count(self, question_id: QuestionId) -> None:
        """Atomically increment view count by 1."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(view_count=questions_table.c.view_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_answer_count(self, question_id: QuestionId) -> None:
        """Atomically increment answer count by 1 and bump last activity."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(
                answer_count=questions_table.c.answer_count + 1,
                last_activity_at=func.now(),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Record which answer (if any) the question author accepted."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(accepted_answer_id=answer_id, last_activity_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()
