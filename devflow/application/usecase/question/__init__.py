"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .delete_question import (
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
)
from .edit_question import EditQuestionRequest, EditQuestionResponse, EditQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionResponse, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .view_question import ViewQuestionRequest, ViewQuestionResponse, ViewQuestionUseCase
from .vote_question import VoteQuestionRequest, VoteQuestionResponse, VoteQuestionUseCase

__all__ = [
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionResponse",
    "DeleteQuestionUseCase",
    "EditQuestionRequest",
    "EditQuestionResponse",
    "EditQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "ViewQuestionRequest",
    "ViewQuestionResponse",
    "ViewQuestionUseCase",
    "VoteQuestionRequest",
    "VoteQuestionResponse",
    "VoteQuestionUseCase",
]
