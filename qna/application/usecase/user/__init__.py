"""User use cases."""

from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
)
from .get_user_profile import GetUserProfileRequest, GetUserProfileUseCase
from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
    UserInfo,
)

__all__ = [
    "GetLeaderboardRequest",
    "GetLeaderboardResponse",
    "GetLeaderboardUseCase",
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
    "UserInfo",
]
