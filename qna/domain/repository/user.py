"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from qna.domain.model.user import User
from qna.domain.value import UserId
from qna.domain.value.types import Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            ConflictError: If the username is already taken
        """
        pass

    @abstractmethod
    async def apply_reputation_delta(self, user_id: UserId, delta: int) -> int:
        """Atomically add ``delta`` to a user's reputation, flooring at 0.

        Args:
            user_id: The user's unique identifier
            delta: Signed amount to add

        Returns:
            The reputation after the update
        """
        pass

    @abstractmethod
    async def find_top_by_reputation(
        self, limit: int = 10, offset: int = 0
    ) -> List[User]:
        """Find users ordered by reputation (desc), then username.

        Args:
            limit: Maximum number of users to return
            offset: Number of users to skip

        Returns:
            List of users
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all users."""
        pass
