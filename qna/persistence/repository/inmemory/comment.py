"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from qna.domain.model import Comment
from qna.domain.repository.comment import CommentRepository
from qna.domain.value import CommentId, TargetKind, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _live(self) -> list[Comment]:
        return [c for c in self._comments.values() if not c.is_deleted]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a live comment by ID."""
        comment = self._comments.get(comment_id)
        return comment if comment and not comment.is_deleted else None

    def _on_target(self, target_kind: TargetKind, target_id: UUID) -> list[Comment]:
        return [
            c
            for c in self._live()
            if c.target_kind == target_kind and c.target_id == target_id
        ]

    async def find_by_target(
        self,
        target_kind: TargetKind,
        target_id: UUID,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments on a target, oldest first."""
        comments = sorted(
            self._on_target(target_kind, target_id), key=lambda c: c.created_at
        )
        return comments[offset : offset + limit]

    async def count_by_target(self, target_kind: TargetKind, target_id: UUID) -> int:
        """Count comments on a target."""
        return len(self._on_target(target_kind, target_id))

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find comments written by a user, newest first."""
        comments = [c for c in self._live() if c.author_id == author_id]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count comments written by a user."""
        return sum(1 for c in self._live() if c.author_id == author_id)

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace a live comment's body and mark it edited."""
        comment = await self.find_by_id(comment_id)
        if not comment:
            return None
        updated = comment.model_copy(
            update={"body": body, "is_edited": True, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Mark a live comment deleted."""
        comment = await self.find_by_id(comment_id)
        if not comment:
            return False
        self._comments[comment_id] = comment.model_copy(
            update={"is_deleted": True, "updated_at": datetime.now()}
        )
        return True
