"""Comment domain service."""

from datetime import datetime
from typing import Mapping
from uuid import UUID, uuid4

import logfire

from qna.domain.error import NotAuthorizedError, NotFoundError
from qna.domain.model import Comment, Target
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    VotableRepository,
)
from qna.domain.value import (
    AnswerId,
    CommentId,
    NotificationType,
    QuestionId,
    TargetKind,
    UserId,
)

from .base import Service
from .notification_service import NotificationService


class CommentService(Service):
    """Domain service for comments on questions and answers."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        targets: Mapping[TargetKind, VotableRepository],
        answer_repository: AnswerRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            targets: Repository for each kind of commentable entity
            answer_repository: Answer repository (thread lookup)
            notification_service: Notification domain service
        """
        self.comment_repository = comment_repository
        self.targets = targets
        self.answer_repository = answer_repository
        self.notification_service = notification_service

    async def add_comment(
        self,
        author_id: UserId,
        target_kind: TargetKind,
        target_id: UUID,
        body: str,
    ) -> Comment:
        """Comment on a question or answer and notify its author.

        Raises:
            NotFoundError: If the target doesn't exist
        """
        with logfire.span(
            "comment_service.add_comment",
            author_id=str(author_id),
            target_kind=target_kind.value,
            target_id=str(target_id),
        ):
            target = await self._load_target(target_kind, target_id)
            question_id = await self._thread_of(target)

            now = datetime.now()
            comment = await self.comment_repository.save(
                Comment(
                    id=CommentId(uuid4()),
                    target_kind=target.kind,
                    target_id=target.id,
                    question_id=question_id,
                    author_id=author_id,
                    body=body,
                    created_at=now,
                    updated_at=now,
                )
            )

            if target.kind is TargetKind.QUESTION:
                await self.notification_service.notify(
                    target.author_id,
                    author_id,
                    NotificationType.COMMENT_ON_QUESTION,
                    question_id=question_id,
                    comment_id=comment.id,
                )
            else:
                await self.notification_service.notify(
                    target.author_id,
                    author_id,
                    NotificationType.COMMENT_ON_ANSWER,
                    question_id=question_id,
                    answer_id=AnswerId(target.id),
                    comment_id=comment.id,
                )

            logfire.info("Comment saved", comment_id=str(comment.id))
            return comment

    async def get_by_id(self, comment_id: CommentId) -> Comment:
        """Get a live comment by ID.

        Raises:
            NotFoundError: If comment not found or deleted
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_for_target(
        self, target_kind: TargetKind, target_id: UUID, limit: int, offset: int
    ) -> tuple[list[Comment], int]:
        """List comments on a question or answer, oldest first.

        Raises:
            NotFoundError: If the target doesn't exist
        """
        target = await self._load_target(target_kind, target_id)
        comments = await self.comment_repository.find_by_target(
            target.kind, target.id, limit=limit, offset=offset
        )
        total = await self.comment_repository.count_by_target(target.kind, target.id)
        return comments, total

    async def list_by_author(
        self, author_id: UserId, limit: int, offset: int
    ) -> tuple[list[Comment], int]:
        """List comments written by a user, newest first."""
        comments = await self.comment_repository.find_by_author(
            author_id, limit=limit, offset=offset
        )
        total = await self.comment_repository.count_by_author(author_id)
        return comments, total

    async def edit(self, comment_id: CommentId, user_id: UserId, body: str) -> Comment:
        """Replace a comment's body.

        Raises:
            NotFoundError: If comment not found or deleted
            NotAuthorizedError: If the user didn't write the comment
        """
        comment = await self.get_by_id(comment_id)
        self._check_author(comment, user_id, "edit")

        updated = await self.comment_repository.update_body(comment.id, body)
        if updated is None:
            raise NotFoundError("Comment", str(comment_id))
        logfire.info("Comment edited", comment_id=str(comment_id))
        return updated

    async def delete(self, comment_id: CommentId, user_id: UserId) -> None:
        """Soft-delete a comment.

        Raises:
            NotFoundError: If comment not found or already deleted
            NotAuthorizedError: If the user didn't write the comment
        """
        comment = await self.get_by_id(comment_id)
        self._check_author(comment, user_id, "delete")

        if not await self.comment_repository.soft_delete(comment.id):
            raise NotFoundError("Comment", str(comment_id))
        logfire.info("Comment deleted", comment_id=str(comment_id))

    async def _load_target(self, target_kind: TargetKind, target_id: UUID) -> Target:
        target = await self.targets[target_kind].find_target(target_id)
        if target is None:
            logfire.warn(
                "Comment target not found",
                target_kind=target_kind.value,
                target_id=str(target_id),
            )
            raise NotFoundError(target_kind.value.capitalize(), str(target_id))
        return target

    async def _thread_of(self, target: Target) -> QuestionId:
        if target.kind is TargetKind.QUESTION:
            return QuestionId(target.id)
        answer = await self.answer_repository.find_by_id(AnswerId(target.id))
        if answer is None:
            raise NotFoundError("Answer", str(target.id))
        return answer.question_id

    @staticmethod
    def _check_author(comment: Comment, user_id: UserId, action: str) -> None:
        if comment.author_id != user_id:
            raise NotAuthorizedError(action, "comment", str(comment.id), str(user_id))
