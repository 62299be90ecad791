"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Comment
from qna.domain.repository import CommentRepository
from qna.domain.value import CommentId, TargetKind, UserId
from qna.persistence.mappers import comment_to_dict, row_to_comment
from qna.persistence.tables import comments_table

_live = comments_table.c.is_deleted.is_(False)


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a live comment by ID."""
        stmt = select(comments_table).where(
            and_(comments_table.c.id == comment_id, _live)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    def _on_target(self, target_kind: TargetKind, target_id: UUID):
        return and_(
            comments_table.c.target_kind == target_kind.value,
            comments_table.c.target_id == target_id,
            _live,
        )

    async def find_by_target(
        self,
        target_kind: TargetKind,
        target_id: UUID,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments on a target, oldest first."""
        stmt = (
            select(comments_table)
            .where(self._on_target(target_kind, target_id))
            .order_by(comments_table.c.created_at)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_target(self, target_kind: TargetKind, target_id: UUID) -> int:
        """Count comments on a target."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(self._on_target(target_kind, target_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Comment]:
        """Find comments written by a user, newest first."""
        stmt = (
            select(comments_table)
            .where(and_(comments_table.c.author_id == author_id, _live))
            .order_by(comments_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count comments written by a user."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(and_(comments_table.c.author_id == author_id, _live))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        await self.session.execute(
            insert(comments_table).values(**comment_to_dict(comment))
        )
        await self.session.flush()
        return comment

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace a live comment's body and mark it edited."""
        stmt = (
            update(comments_table)
            .where(and_(comments_table.c.id == comment_id, _live))
            .values(body=body, is_edited=True, updated_at=func.now())
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Mark a live comment deleted."""
        stmt = (
            update(comments_table)
            .where(and_(comments_table.c.id == comment_id, _live))
            .values(is_deleted=True, updated_at=func.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
