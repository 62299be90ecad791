"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import ValidationError

from qna.application.usecase.pagination import Pagination
from qna.application.usecase.user import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
    UserInfo,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.post(
    "", response_model=RegisterUserResponse, status_code=status.HTTP_201_CREATED
)
async def register_user(
    request: RegisterUserRequest,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> RegisterUserResponse:
    """Create a user and return a bearer token for them.

    Example:
        POST /users
        {"username": "alice", "bio": "Postgres enthusiast"}

        Response:
        {
            "user": {"id": "...", "username": "alice", "reputation": 0, ...},
            "token": "eyJ..."
        }
    """
    return await register_user_use_case.execute(request)


@router.get("/leaderboard", response_model=GetLeaderboardResponse)
async def get_leaderboard(
    get_leaderboard_use_case: FromDishka[GetLeaderboardUseCase],
    pagination: FromDishka[Pagination],
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
) -> GetLeaderboardResponse:
    """Users ranked by reputation, highest first."""
    return await get_leaderboard_use_case.execute(
        GetLeaderboardRequest(page=pagination.params(page=page, limit=limit))
    )


@router.get("/{username}", response_model=UserInfo)
async def get_user_profile(
    username: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> UserInfo:
    """Get a user's public profile by username.

    Raises:
        HTTPException: If user not found
    """
    try:
        profile = await get_user_profile_use_case.execute(
            GetUserProfileRequest(username=username)
        )
    except ValidationError:
        # Malformed usernames never exist
        profile = None

    if not profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User not found: {username}",
        )
    return profile
