"""Domain value objects for the Q&A forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from qna.domain.value.common import RootValueObject, ValueObject


class VoteDirection(str, Enum):
    """Direction of a vote.

    Values match the wire format (``voteType``).
    """

    UP = "upvote"
    DOWN = "downvote"

    @property
    def score(self) -> int:
        """Contribution of a single vote in this direction to a score."""
        return 1 if self is VoteDirection.UP else -1


class TargetKind(str, Enum):
    """Kind of entity that can be voted on.

    Values match the wire format (``targetType``).
    """

    QUESTION = "question"
    ANSWER = "answer"


class VoteTransition(str, Enum):
    """Outcome of a vote submission against existing ledger state."""

    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"


class NotificationType(str, Enum):
    """Why a user is being notified."""

    NEW_ANSWER = "new_answer"
    ANSWER_ACCEPTED = "answer_accepted"
    COMMENT_ON_QUESTION = "comment_on_question"
    COMMENT_ON_ANSWER = "comment_on_answer"


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"  # created_at DESC
    ACTIVE = "active"  # last_activity_at DESC
    VOTES = "votes"  # vote_score DESC
    UNANSWERED = "unanswered"  # answer_count == 0, newest first


class Username(RootValueObject[str]):
    """Public username.

    3-30 characters, letters, digits and underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits or underscores"
            )
        return v


class TagName(RootValueObject[str]):
    """Tag name for categorizing questions.

    Must be lowercase, alphanumeric with hyphens, 2-25 characters.
    Examples: 'python', 'asyncio', 'machine-learning'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not re.match(r"^[a-z0-9-]{2,25}$", v):
            raise ValueError(
                "Tag name must be 2-25 characters, lowercase, alphanumeric with hyphens"
            )
        return v


class VoteTally(ValueObject):
    """Aggregate vote counts for a single target."""

    upvotes: int = 0
    downvotes: int = 0

    @property
    def total(self) -> int:
        """Net score (upvotes minus downvotes)."""
        return self.upvotes - self.downvotes
