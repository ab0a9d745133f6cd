"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from devflow.config import Settings
from devflow.util.logging import get_logger

logger = get_logger(__name__)


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    logger.info(
        "Creating database engine (pool_size=%d, max_overflow=%d)",
        settings.database.pool_size,
        settings.database.max_overflow,
    )
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


async def finish_session(
    session: AsyncSession, error: BaseException | None = None
) -> None:
    """End a request-scoped session.

    Commits the request's work, or rolls it back when the request failed.

    Args:
        session: Session opened for the request
        error: Exception the request ended with, if any
    """
    if error is None:
        await session.commit()
        return

    logger.info("Rolling back session after %s", type(error).__name__)
    await session.rollback()
