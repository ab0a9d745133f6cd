"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .question import InMemoryQuestionRepository
from .tag import InMemoryTagRepository
from .transaction import InMemoryTransaction
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryQuestionRepository",
    "InMemoryTagRepository",
    "InMemoryTransaction",
    "InMemoryUserRepository",
]
