"""Persistence infrastructure providers."""

from collections.abc import AsyncGenerator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from devflow.config import Settings
from devflow.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    Transaction,
    UserRepository,
)
from devflow.persistence.database import (
    create_engine,
    create_session_factory,
    finish_session,
)
from devflow.persistence.repository import (
    PostgresAnswerRepository,
    PostgresQuestionRepository,
    PostgresTagRepository,
    PostgresUserRepository,
)
from devflow.persistence.transaction import SessionTransaction
from devflow.util.di.base import ProviderBase
from devflow.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncGenerator[AsyncSession, BaseException | None]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if the request scope closed with one.
        """
        with logfire.span("persistence.request_session"):
            async with session_factory() as session:
                error = yield session
                await finish_session(session, error)

    @provide(scope=Scope.REQUEST)
    def get_transaction(self, session: AsyncSession) -> Transaction:
        """Provide the request transaction."""
        return SessionTransaction(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        """Provide Question repository."""
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, session: AsyncSession) -> AnswerRepository:
        """Provide Answer repository."""
        return PostgresAnswerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        """Provide Tag repository."""
        return PostgresTagRepository(session)
