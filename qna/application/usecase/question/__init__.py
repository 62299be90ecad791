"""Question use cases."""

from .ask_question import AskQuestionRequest, AskQuestionUseCase, QuestionInfo
from .get_question import GetQuestionRequest, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)

__all__ = [
    "AskQuestionRequest",
    "AskQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionInfo",
]
