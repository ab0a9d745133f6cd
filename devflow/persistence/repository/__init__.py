"""PostgreSQL repository implementations."""

from devflow.persistence.repository.answer import PostgresAnswerRepository
from devflow.persistence.repository.question import PostgresQuestionRepository
from devflow.persistence.repository.tag import PostgresTagRepository
from devflow.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresTagRepository",
]
