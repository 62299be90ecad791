"""Edit and delete comment use cases."""

from uuid import UUID

from pydantic import Field

from qna.application.usecase.base import ApiModel, BaseUseCase
from qna.application.usecase.comment.add_comment import CommentInfo
from qna.domain.service import CommentService
from qna.domain.value import CommentId, UserId


class EditCommentRequest(ApiModel):
    """Edit comment request."""

    comment_id: UUID
    body: str = Field(min_length=1, max_length=600)
    user_id: str  # User ID from authenticated user


class EditCommentUseCase(BaseUseCase):
    """Use case for the author rewriting their comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: EditCommentRequest) -> CommentInfo:
        """Execute edit comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist or was deleted
            NotAuthorizedError: If the caller didn't write the comment
        """
        comment = await self.comment_service.edit(
            CommentId(request.comment_id),
            UserId(UUID(request.user_id)),
            request.body,
        )
        return CommentInfo.from_comment(comment)


class DeleteCommentRequest(ApiModel):
    """Delete comment request."""

    comment_id: UUID
    user_id: str  # User ID from authenticated user


class DeleteCommentUseCase(BaseUseCase):
    """Use case for the author deleting their comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist or was deleted
            NotAuthorizedError: If the caller didn't write the comment
        """
        await self.comment_service.delete(
            CommentId(request.comment_id), UserId(UUID(request.user_id))
        )
