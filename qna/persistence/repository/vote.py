"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.error import ConflictError
from qna.domain.model import Vote
from qna.domain.repository import VoteRepository
from qna.domain.value import TargetKind, UserId, VoteDirection, VoteId, VoteTally
from qna.persistence.mappers import row_to_vote, vote_to_dict
from qna.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_voter_and_target(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific target."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter_id == voter_id,
                votes_table.c.target_kind == target_kind.value,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        The insert runs in a savepoint so a unique-constraint violation
        leaves the surrounding transaction usable for a retry.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError(
                "vote", f"{vote.voter_id}/{vote.target_kind.value}/{vote.target_id}"
            ) from e
        return vote

    async def update_direction(
        self,
        vote_id: VoteId,
        current: VoteDirection,
        direction: VoteDirection,
    ) -> Optional[Vote]:
        """Flip a vote's direction if it still has the direction we read."""
        stmt = (
            update(votes_table)
            .where(
                and_(
                    votes_table.c.id == vote_id,
                    votes_table.c.direction == current.value,
                )
            )
            .values(direction=direction.value, updated_at=func.now())
            .returning(*votes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete(
        self, vote_id: VoteId, expected: Optional[VoteDirection] = None
    ) -> bool:
        """Delete a vote, optionally only while it has the expected direction."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        if expected is not None:
            stmt = stmt.where(votes_table.c.direction == expected.value)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def tally(self, target_kind: TargetKind, target_id: UUID) -> VoteTally:
        """Count up and down votes on a target."""
        stmt = (
            select(votes_table.c.direction, func.count())
            .where(
                and_(
                    votes_table.c.target_kind == target_kind.value,
                    votes_table.c.target_id == target_id,
                )
            )
            .group_by(votes_table.c.direction)
        )
        result = await self.session.execute(stmt)
        counts = {direction: count for direction, count in result.all()}
        return VoteTally(
            upvotes=counts.get(VoteDirection.UP.value, 0),
            downvotes=counts.get(VoteDirection.DOWN.value, 0),
        )

    async def find_by_voter(
        self, voter_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Vote]:
        """Find votes cast by a user, newest first."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.voter_id == voter_id)
            .order_by(votes_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count_by_voter(self, voter_id: UserId) -> int:
        """Count votes cast by a user."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.voter_id == voter_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
