"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from devflow.domain.model import User
from devflow.domain.repository.user import UserRepository
from devflow.domain.value import ClerkId, QuestionId, UserId, Username
from devflow.persistence.mappers import row_to_user, user_to_dict
from devflow.persistence.tables import saved_questions_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users in one query."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def find_by_clerk_id(self, clerk_id: ClerkId) -> Optional[User]:
        """Find a user by their identity provider id."""
        with logfire.span("user_repository.find_by_clerk_id", clerk_id=clerk_id):
            stmt = select(users_table).where(users_table.c.clerk_id == clerk_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_user(row._asdict()) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, ignoring case."""
        stmt = select(users_table).where(
            func.lower(users_table.c.username) == username.root.lower()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        with logfire.span("user_repository.save", user_id=str(user.id)):
            user_dict = user_to_dict(user)
            stmt = insert(users_table).values(**user_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={
                    key: stmt.excluded[key]
                    for key in user_dict
                    if key not in ("id", "clerk_id", "joined_at")
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return user

    async def find_saved_question_ids(self, user_id: UserId) -> list[QuestionId]:
        """List the ids of the questions in a user's collection."""
        stmt = (
            select(saved_questions_table.c.question_id)
            .where(saved_questions_table.c.user_id == user_id)
            .order_by(saved_questions_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [QuestionId(row.question_id) for row in result.fetchall()]

    async def has_saved_question(self, user_id: UserId, question_id: QuestionId) -> bool:
        """Check whether a question is in a user's collection."""
        stmt = select(func.count()).where(
            saved_questions_table.c.user_id == user_id,
            saved_questions_table.c.question_id == question_id,
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def add_saved_question(self, user_id: UserId, question_id: QuestionId) -> None:
        """Add a question to a user's collection."""
        stmt = (
            insert(saved_questions_table)
            .values(user_id=user_id, question_id=question_id)
            .on_conflict_do_nothing()
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def remove_saved_question(
        self, user_id: UserId, question_id: QuestionId
    ) -> bool:
        """Remove a question from a user's collection."""
        stmt = (
            saved_questions_table.delete()
            .where(
                saved_questions_table.c.user_id == user_id,
                saved_questions_table.c.question_id == question_id,
            )
            .returning(saved_questions_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        removed = result.fetchone() is not None
        await self.session.flush()
        return removed

    async def remove_question_from_collections(self, question_id: QuestionId) -> None:
        """Remove a question from every user's collection."""
        stmt = saved_questions_table.delete().where(
            saved_questions_table.c.question_id == question_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
