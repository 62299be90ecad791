"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from qna.domain.error import ConflictError, NotFoundError
from qna.domain.model import User
from qna.domain.repository import UserRepository
from qna.domain.value import UserId
from qna.domain.value.types import Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_username(self, username: Username) -> User | None:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_username", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if user:
                logfire.info("User found", username=username.root, user_id=str(user.id))
            else:
                logfire.warn("User not found", username=username.root)
            return user

    async def register(
        self,
        username: Username,
        email: str | None = None,
        bio: str | None = None,
    ) -> User:
        """Create a new user with zero reputation.

        Raises:
            ConflictError: If the username is taken
        """
        with logfire.span("user_service.register", username=username.root):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username taken", username=username.root)
                raise ConflictError("username", username.root)

            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                bio=bio,
                reputation=0,
                created_at=datetime.now(),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def apply_reputation_delta(self, user_id: UserId, delta: int) -> int:
        """Atomically adjust a user's reputation, never going below zero.

        Args:
            user_id: User ID
            delta: Signed amount to add

        Returns:
            New reputation
        """
        with logfire.span(
            "user_service.apply_reputation_delta", user_id=str(user_id), delta=delta
        ):
            reputation = await self.user_repository.apply_reputation_delta(
                user_id, delta
            )
            logfire.info(
                "Reputation updated", user_id=str(user_id), reputation=reputation
            )
            return reputation

    async def get_leaderboard(self, limit: int, offset: int) -> tuple[list[User], int]:
        """Top users by reputation.

        Returns:
            Page of users and the total number of users
        """
        users = await self.user_repository.find_top_by_reputation(
            limit=limit, offset=offset
        )
        total = await self.user_repository.count()
        return users, total
