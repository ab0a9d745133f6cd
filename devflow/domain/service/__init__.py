"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .jwt_service import JWTService
from .question_service import QuestionService
from .tag_service import TagService
from .user_service import UserService
from .vote_coordinator import compute_vote_update
from .vote_service import VoteService

__all__ = [
    "AnswerService",
    "JWTService",
    "QuestionService",
    "Service",
    "TagService",
    "UserService",
    "VoteService",
    "compute_vote_update",
]
