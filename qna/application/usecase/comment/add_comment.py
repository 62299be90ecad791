"""Add comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from qna.application.usecase.base import ApiModel, BaseUseCase
from qna.domain.model import Comment
from qna.domain.service import CommentService, UserService
from qna.domain.value import TargetKind, UserId


class CommentInfo(ApiModel):
    """Comment as returned to clients."""

    id: str
    target: str
    target_type: TargetKind
    question: str
    author: str
    body: str
    is_edited: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentInfo":
        return cls(
            id=str(comment.id),
            target=str(comment.target_id),
            target_type=comment.target_kind,
            question=str(comment.question_id),
            author=str(comment.author_id),
            body=comment.body,
            is_edited=comment.is_edited,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class AddCommentRequest(ApiModel):
    """Add comment request."""

    target: UUID
    target_type: TargetKind
    body: str = Field(min_length=1, max_length=600)
    author_id: str  # User ID from authenticated user


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a question or answer."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> CommentInfo:
        """Execute add comment flow.

        Raises:
            NotFoundError: If the author or target doesn't exist
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        comment = await self.comment_service.add_comment(
            author_id=author.id,
            target_kind=request.target_type,
            target_id=request.target,
            body=request.body,
        )
        return CommentInfo.from_comment(comment)
