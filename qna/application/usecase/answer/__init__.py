"""Answer use cases."""

from .accept_answer import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    UnacceptAnswerUseCase,
)
from .list_answers import ListAnswersRequest, ListAnswersResponse, ListAnswersUseCase
from .post_answer import AnswerInfo, PostAnswerRequest, PostAnswerUseCase

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerUseCase",
    "AnswerInfo",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
    "PostAnswerRequest",
    "PostAnswerUseCase",
    "UnacceptAnswerUseCase",
]
