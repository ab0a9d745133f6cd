"""Answer use cases."""

from .create_answer import CreateAnswerRequest, CreateAnswerResponse, CreateAnswerUseCase
from .delete_answer import DeleteAnswerRequest, DeleteAnswerResponse, DeleteAnswerUseCase
from .list_answers import ListAnswersRequest, ListAnswersResponse, ListAnswersUseCase
from .list_user_answers import (
    ListUserAnswersRequest,
    ListUserAnswersResponse,
    ListUserAnswersUseCase,
)
from .vote_answer import VoteAnswerRequest, VoteAnswerResponse, VoteAnswerUseCase

__all__ = [
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerResponse",
    "DeleteAnswerUseCase",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
    "ListUserAnswersRequest",
    "ListUserAnswersResponse",
    "ListUserAnswersUseCase",
    "VoteAnswerRequest",
    "VoteAnswerResponse",
    "VoteAnswerUseCase",
]
