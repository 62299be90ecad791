"""List user votes use case."""

from uuid import UUID

import logfire

from qna.application.usecase.base import (
    ApiModel,
    BaseUseCase,
    PageRequest,
    PaginationMeta,
)
from qna.application.usecase.vote.cast_vote import VoteInfo
from qna.domain.service import UserService, VoteService
from qna.domain.value import UserId


class ListUserVotesRequest(ApiModel):
    """List user votes request."""

    user_id: str
    page: PageRequest = PageRequest()


class ListUserVotesResponse(ApiModel):
    """Page of votes cast by a user."""

    votes: list[VoteInfo]
    pagination: PaginationMeta


class ListUserVotesUseCase(BaseUseCase):
    """Use case for listing the votes a user has cast, newest first."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize list user votes use case.

        Args:
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: ListUserVotesRequest) -> ListUserVotesResponse:
        """Execute list user votes flow.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        with logfire.span("list_user_votes.execute", user_id=request.user_id):
            user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
            votes, total = await self.vote_service.list_user_votes(
                user.id, limit=request.page.limit, offset=request.page.offset
            )
            return ListUserVotesResponse(
                votes=[VoteInfo.from_vote(vote) for vote in votes],
                pagination=PaginationMeta.build(
                    total, request.page.page, request.page.limit
                ),
            )
