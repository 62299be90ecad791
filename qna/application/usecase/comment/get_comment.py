"""Get comment use case."""

from uuid import UUID

from qna.application.usecase.base import ApiModel, BaseUseCase
from qna.application.usecase.comment.add_comment import CommentInfo
from qna.domain.service import CommentService
from qna.domain.value import CommentId


class GetCommentRequest(ApiModel):
    """Get comment request."""

    comment_id: UUID


class GetCommentUseCase(BaseUseCase):
    """Use case for reading a single comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentInfo:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist or was deleted
        """
        comment = await self.comment_service.get_by_id(CommentId(request.comment_id))
        return CommentInfo.from_comment(comment)
