"""Domain layer DI providers."""

from dishka import Scope, provide

from qna.config import AuthSettings, ReputationSettings
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
    VotableRepository,
    VoteRepository,
)
from qna.domain.service import (
    AnswerService,
    CommentService,
    EventOutbox,
    JWTService,
    NotificationService,
    QuestionService,
    ReputationTable,
    UserService,
    VoteLedger,
    VoteService,
)
from qna.domain.value import TargetKind
from qna.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    Services that publish events get the request's outbox, so nothing is
    announced before the transaction commits.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_reputation_table(self, settings: ReputationSettings) -> ReputationTable:
        """Provide reputation point table."""
        return ReputationTable(settings)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service (stateless, shared by WebSockets)."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_votable_repositories(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> dict[TargetKind, VotableRepository]:
        """Provide the repository for each kind of votable entity."""
        return {
            TargetKind.QUESTION: question_repository,
            TargetKind.ANSWER: answer_repository,
        }

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        user_service: UserService,
        outbox: EventOutbox,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            user_service=user_service,
            broadcaster=outbox,
        )

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        user_service: UserService,
        reputation: ReputationTable,
        notification_service: NotificationService,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            user_service=user_service,
            reputation=reputation,
            notification_service=notification_service,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        targets: dict[TargetKind, VotableRepository],
        answer_repository: AnswerRepository,
        notification_service: NotificationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            targets=targets,
            answer_repository=answer_repository,
            notification_service=notification_service,
        )

    @provide
    def get_vote_ledger(
        self,
        vote_repository: VoteRepository,
        targets: dict[TargetKind, VotableRepository],
        reputation: ReputationTable,
    ) -> VoteLedger:
        """Provide vote ledger."""
        return VoteLedger(
            vote_repository=vote_repository, targets=targets, reputation=reputation
        )

    @provide
    def get_vote_service(
        self,
        vote_ledger: VoteLedger,
        vote_repository: VoteRepository,
        targets: dict[TargetKind, VotableRepository],
        user_service: UserService,
        outbox: EventOutbox,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_ledger=vote_ledger,
            vote_repository=vote_repository,
            targets=targets,
            user_service=user_service,
            broadcaster=outbox,
        )
