"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase, CommentInfo
from .edit_comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentUseCase
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ListUserCommentsRequest,
    ListUserCommentsUseCase,
)

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentInfo",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "EditCommentRequest",
    "EditCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ListUserCommentsRequest",
    "ListUserCommentsUseCase",
]
