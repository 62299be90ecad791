"""Get leaderboard use case."""

from qna.application.usecase.base import ApiModel, PageRequest, PaginationMeta
from qna.application.usecase.user.register_user import UserInfo
from qna.domain.service import UserService


class GetLeaderboardRequest(ApiModel):
    """Get leaderboard request."""

    page: PageRequest = PageRequest()


class GetLeaderboardResponse(ApiModel):
    """Users ranked by reputation."""

    users: list[UserInfo]
    pagination: PaginationMeta


class GetLeaderboardUseCase:
    """Use case for ranking users by reputation."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetLeaderboardRequest) -> GetLeaderboardResponse:
        users, total = await self.user_service.get_leaderboard(
            limit=request.page.limit, offset=request.page.offset
        )
        return GetLeaderboardResponse(
            users=[UserInfo.from_user(user) for user in users],
            pagination=PaginationMeta.build(
                total, request.page.page, request.page.limit
            ),
        )
