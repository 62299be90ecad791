"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from qna.domain.model.comment import Comment
from qna.domain.value import CommentId, TargetKind, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Soft-deleted comments are invisible to every read.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a live comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_target(
        self,
        target_kind: TargetKind,
        target_id: UUID,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments on a question or answer, oldest first."""
        pass

    @abstractmethod
    async def count_by_target(self, target_kind: TargetKind, target_id: UUID) -> int:
        """Count comments on a question or answer."""
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Comment]:
        """Find comments written by a user, newest first."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count comments written by a user."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        pass

    @abstractmethod
    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace a live comment's body and mark it edited.

        Returns:
            The updated comment, or None if it doesn't exist or was deleted
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Mark a comment deleted.

        Returns:
            True if a live comment was deleted, False otherwise
        """
        pass
