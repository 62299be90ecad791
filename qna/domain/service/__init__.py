"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .broadcaster import Broadcaster, EventOutbox, NullBroadcaster
from .comment_service import CommentService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .question_service import QuestionService
from .reputation import ReputationTable
from .user_service import UserService
from .vote_ledger import VoteLedger, VoteOutcome
from .vote_service import VoteResult, VoteService

__all__ = [
    "AnswerService",
    "Broadcaster",
    "CommentService",
    "EventOutbox",
    "JWTService",
    "NotificationService",
    "NullBroadcaster",
    "QuestionService",
    "ReputationTable",
    "Service",
    "UserService",
    "VoteLedger",
    "VoteOutcome",
    "VoteResult",
    "VoteService",
]
