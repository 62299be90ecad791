"""Mock persistence providers for testing."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
from qna.domain.service import Broadcaster, EventOutbox
from qna.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
    InMemoryQuestionRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from qna.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across HTTP requests made
    through one test client. Every test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    async def get_event_outbox(
        self, broadcaster: Broadcaster
    ) -> AsyncIterator[EventOutbox]:
        """Provide the request's event outbox.

        There is no transaction to wait for, so held events go out when the
        request ends without an error.
        """
        outbox = EventOutbox(broadcaster)
        try:
            yield outbox
        except Exception:
            outbox.discard()
            raise
        await outbox.flush()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_question_repository(self) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository()

    @provide(scope=Scope.APP)
    def get_answer_repository(self) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()
