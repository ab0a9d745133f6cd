"""Mock persistence providers for testing."""

from dishka import Scope, provide

from devflow.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    Transaction,
    UserRepository,
)
from devflow.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
    InMemoryTagRepository,
    InMemoryTransaction,
    InMemoryUserRepository,
)
from devflow.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that data written in one request is
    visible to the next, as with a database. Every test builds its own
    container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_question_repository(self) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository()

    @provide(scope=Scope.APP)
    def get_answer_repository(self) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository()

    @provide(scope=Scope.APP)
    def get_tag_repository(self) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository()

    @provide(scope=Scope.APP)
    def get_transaction(self) -> Transaction:
        """Provide in-memory transaction."""
        return InMemoryTransaction()
