"""Repository interfaces for DevFlow domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from devflow.domain.repository.answer import AnswerRepository, AnswerSort
from devflow.domain.repository.question import (
    QuestionCriteria,
    QuestionFilter,
    QuestionRepository,
    SortField,
    SortKey,
)
from devflow.domain.repository.tag import TagRepository, TagSort
from devflow.domain.repository.transaction import Transaction
from devflow.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "QuestionCriteria",
    "QuestionFilter",
    "SortField",
    "SortKey",
    "AnswerRepository",
    "AnswerSort",
    "TagRepository",
    "TagSort",
    "Transaction",
]
