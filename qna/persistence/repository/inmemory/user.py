"""In-memory user repository for testing."""

from typing import Optional

from qna.domain.error import ConflictError, NotFoundError
from qna.domain.model.user import User
from qna.domain.repository.user import UserRepository
from qna.domain.value import UserId
from qna.domain.value.types import Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        existing = await self.find_by_username(user.username)
        if existing and existing.id != user.id:
            raise ConflictError("username", user.username.root)
        self._users[user.id] = user
        return user

    async def apply_reputation_delta(self, user_id: UserId, delta: int) -> int:
        """Add delta to reputation (minimum 0)."""
        user = self._users.get(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        updated_user = user.model_copy(
            update={"reputation": max(0, user.reputation + delta)}
        )
        self._users[user_id] = updated_user
        return updated_user.reputation

    async def find_top_by_reputation(
        self, limit: int = 10, offset: int = 0
    ) -> list[User]:
        """Find users ordered by reputation, highest first."""
        users = sorted(
            self._users.values(), key=lambda u: (-u.reputation, u.username.root)
        )
        return users[offset : offset + limit]

    async def count(self) -> int:
        """Count all users."""
        return len(self._users)
