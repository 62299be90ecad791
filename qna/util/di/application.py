"""Application layer DI providers."""

from dishka import Scope, provide

from qna.application.usecase.answer import (
    AcceptAnswerUseCase,
    ListAnswersUseCase,
    PostAnswerUseCase,
    UnacceptAnswerUseCase,
)
from qna.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    ListUserCommentsUseCase,
)
from qna.application.usecase.notification import (
    DeleteNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from qna.application.usecase.question import (
    AskQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from qna.application.usecase.user import (
    GetLeaderboardUseCase,
    GetUserProfileUseCase,
    RegisterUserUseCase,
)
from qna.application.usecase.vote import (
    CastVoteUseCase,
    GetUserVoteUseCase,
    GetVoteStatsUseCase,
    ListUserVotesUseCase,
    RemoveVoteUseCase,
)
from qna.domain.service import (
    AnswerService,
    CommentService,
    JWTService,
    NotificationService,
    QuestionService,
    UserService,
    VoteService,
)
from qna.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_leaderboard_use_case(
        self, user_service: UserService
    ) -> GetLeaderboardUseCase:
        """Provide leaderboard use case."""
        return GetLeaderboardUseCase(user_service=user_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_ask_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> AskQuestionUseCase:
        """Provide ask question use case."""
        return AskQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(question_service=question_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_post_answer_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> PostAnswerUseCase:
        """Provide post answer use case."""
        return PostAnswerUseCase(answer_service=answer_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(
        self, answer_service: AnswerService
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self, answer_service: AnswerService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_unaccept_answer_use_case(
        self, answer_service: AnswerService
    ) -> UnacceptAnswerUseCase:
        """Provide unaccept answer use case."""
        return UnacceptAnswerUseCase(answer_service=answer_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_vote_stats_use_case(
        self, vote_service: VoteService
    ) -> GetVoteStatsUseCase:
        """Provide vote stats use case."""
        return GetVoteStatsUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_vote_use_case(
        self, vote_service: VoteService
    ) -> GetUserVoteUseCase:
        """Provide get user vote use case."""
        return GetUserVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_votes_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> ListUserVotesUseCase:
        """Provide list user votes use case."""
        return ListUserVotesUseCase(
            vote_service=vote_service, user_service=user_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_comments_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> ListUserCommentsUseCase:
        """Provide list user comments use case."""
        return ListUserCommentsUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_edit_comment_use_case(
        self, comment_service: CommentService
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        """Provide unread count use case."""
        return GetUnreadCountUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(notification_service=notification_service)
