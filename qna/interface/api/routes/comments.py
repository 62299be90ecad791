"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import Field

from qna.application.usecase.base import ApiModel
from qna.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentInfo,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ListUserCommentsRequest,
    ListUserCommentsUseCase,
)
from qna.application.usecase.pagination import Pagination
from qna.domain.service import JWTService
from qna.domain.value import TargetKind
from qna.interface.api.auth import bearer_token, require_user_id

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(ApiModel):
    """API request for commenting on a question or answer."""

    target: UUID
    target_type: TargetKind
    body: str = Field(min_length=1, max_length=600)


class EditCommentAPIRequest(ApiModel):
    """API request for editing a comment."""

    body: str = Field(min_length=1, max_length=600)


@router.post("", response_model=CommentInfo, status_code=status.HTTP_201_CREATED)
async def add_comment(
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> CommentInfo:
    """Comment on a question or answer. Requires authentication."""
    user_id = require_user_id(jwt_service, token, "comment")
    return await add_comment_use_case.execute(
        AddCommentRequest(
            target=request.target,
            target_type=request.target_type,
            body=request.body.strip(),
            author_id=user_id,
        )
    )


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    pagination: FromDishka[Pagination],
    target: UUID,
    target_type: TargetKind = Query(alias="targetType"),
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
) -> ListCommentsResponse:
    """List comments on a question or answer, oldest first."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(
            target=target,
            target_type=target_type,
            page=pagination.params(page=page, limit=limit),
        )
    )


@router.get("/user/{user_id}", response_model=ListCommentsResponse)
async def list_user_comments(
    user_id: UUID,
    list_user_comments_use_case: FromDishka[ListUserCommentsUseCase],
    pagination: FromDishka[Pagination],
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
) -> ListCommentsResponse:
    """List comments written by a user, newest first."""
    return await list_user_comments_use_case.execute(
        ListUserCommentsRequest(
            user_id=user_id, page=pagination.params(page=page, limit=limit)
        )
    )


@router.get("/{comment_id}", response_model=CommentInfo)
async def get_comment(
    comment_id: UUID,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentInfo:
    """Get a comment by ID."""
    return await get_comment_use_case.execute(GetCommentRequest(comment_id=comment_id))


@router.put("/{comment_id}", response_model=CommentInfo)
async def edit_comment(
    comment_id: UUID,
    request: EditCommentAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> CommentInfo:
    """Edit a comment. Only its author may."""
    user_id = require_user_id(jwt_service, token, "edit a comment")
    return await edit_comment_use_case.execute(
        EditCommentRequest(
            comment_id=comment_id, body=request.body.strip(), user_id=user_id
        )
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> None:
    """Delete a comment. Only its author may."""
    user_id = require_user_id(jwt_service, token, "delete a comment")
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
    )
