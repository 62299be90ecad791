"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.error import ConflictError, NotFoundError
from qna.domain.model import User
from qna.domain.repository import UserRepository
from qna.domain.value import UserId
from qna.domain.value.types import Username
from qna.persistence.mappers import row_to_user, user_to_dict
from qna.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            ConflictError: If the username belongs to another user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError("username", user.username.root) from e
        return user

    async def apply_reputation_delta(self, user_id: UserId, delta: int) -> int:
        """Atomically add delta to reputation (minimum 0).

        Args:
            user_id: User ID to update
            delta: Signed amount to add

        Returns:
            Reputation after the update

        Raises:
            NotFoundError: If the user doesn't exist
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(reputation=func.greatest(users_table.c.reputation + delta, 0))
            .returning(users_table.c.reputation)
        )
        result = await self.session.execute(stmt)
        reputation = result.scalar_one_or_none()
        await self.session.flush()
        if reputation is None:
            raise NotFoundError("User", str(user_id))
        return reputation

    async def find_top_by_reputation(
        self, limit: int = 10, offset: int = 0
    ) -> List[User]:
        """Find users ordered by reputation, highest first."""
        stmt = (
            select(users_table)
            .order_by(users_table.c.reputation.desc(), users_table.c.username)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def count(self) -> int:
        """Count all users."""
        result = await self.session.execute(
            select(func.count()).select_from(users_table)
        )
        return result.scalar_one()
