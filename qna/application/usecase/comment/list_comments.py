"""List comments use cases."""

from uuid import UUID

from qna.application.usecase.base import (
    ApiModel,
    BaseUseCase,
    PageRequest,
    PaginationMeta,
)
from qna.application.usecase.comment.add_comment import CommentInfo
from qna.domain.service import CommentService, UserService
from qna.domain.value import TargetKind, UserId


class ListCommentsResponse(ApiModel):
    """Page of comments."""

    comments: list[CommentInfo]
    pagination: PaginationMeta


class ListCommentsRequest(ApiModel):
    """List comments on a question or answer."""

    target: UUID
    target_type: TargetKind
    page: PageRequest = PageRequest()


class ListCommentsUseCase(BaseUseCase):
    """Use case for reading the comments on a post, oldest first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Raises:
            NotFoundError: If the target doesn't exist
        """
        comments, total = await self.comment_service.list_for_target(
            request.target_type,
            request.target,
            limit=request.page.limit,
            offset=request.page.offset,
        )
        return ListCommentsResponse(
            comments=[CommentInfo.from_comment(c) for c in comments],
            pagination=PaginationMeta.build(
                total, request.page.page, request.page.limit
            ),
        )


class ListUserCommentsRequest(ApiModel):
    """List comments written by a user."""

    user_id: UUID
    page: PageRequest = PageRequest()


class ListUserCommentsUseCase(BaseUseCase):
    """Use case for a user's comment history, newest first."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: ListUserCommentsRequest) -> ListCommentsResponse:
        """Execute list user comments flow.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        comments, total = await self.comment_service.list_by_author(
            user.id, limit=request.page.limit, offset=request.page.offset
        )
        return ListCommentsResponse(
            comments=[CommentInfo.from_comment(c) for c in comments],
            pagination=PaginationMeta.build(
                total, request.page.page, request.page.limit
            ),
        )
