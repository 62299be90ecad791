"""Register user use case."""

from datetime import datetime

import logfire
from pydantic import Field

from qna.application.usecase.base import ApiModel
from qna.domain.model import User
from qna.domain.service import JWTService, UserService
from qna.domain.value.types import Username


class UserInfo(ApiModel):
    """Public user profile."""

    id: str
    username: Username
    bio: str | None
    reputation: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            username=user.username,
            bio=user.bio,
            reputation=user.reputation,
            created_at=user.created_at,
        )


class RegisterUserRequest(ApiModel):
    """Register user request."""

    username: Username
    email: str | None = Field(default=None, max_length=255)
    bio: str | None = Field(default=None, max_length=500)


class RegisterUserResponse(ApiModel):
    """Register user response with a bearer token for the new user."""

    user: UserInfo
    token: str


class RegisterUserUseCase:
    """Use case for creating a user account."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute register user flow.

        Raises:
            ConflictError: If the username is taken
        """
        with logfire.span("register_user.execute", username=request.username.root):
            user = await self.user_service.register(
                username=request.username, email=request.email, bio=request.bio
            )
            token = self.jwt_service.create_token(str(user.id), user.username.root)
            return RegisterUserResponse(user=UserInfo.from_user(user), token=token)
