"""Get user profile use case."""

from qna.application.usecase.base import ApiModel
from qna.application.usecase.user.register_user import UserInfo
from qna.domain.service import UserService
from qna.domain.value.types import Username


class GetUserProfileRequest(ApiModel):
    """Get user profile request."""

    username: Username


class GetUserProfileUseCase:
    """Use case for getting a user's public profile by username."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> UserInfo | None:
        """Execute get user profile flow.

        Returns:
            User profile information if user exists, None otherwise
        """
        user = await self.user_service.get_user_by_username(request.username)
        if not user:
            return None
        return UserInfo.from_user(user)
