"""PostgreSQL repository implementations."""

from qna.persistence.repository.answer import PostgresAnswerRepository
from qna.persistence.repository.comment import PostgresCommentRepository
from qna.persistence.repository.notification import PostgresNotificationRepository
from qna.persistence.repository.question import PostgresQuestionRepository
from qna.persistence.repository.user import PostgresUserRepository
from qna.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
    "PostgresVoteRepository",
]
