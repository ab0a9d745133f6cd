"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from devflow.domain.model import Answer
from devflow.domain.repository.answer import AnswerRepository, AnswerSort
from devflow.domain.value import AnswerId, QuestionId, UserId, VoteUpdate
from devflow.persistence.mappers import answer_to_dict, row_to_answer
from devflow.persistence.repository.question import vote_values
from devflow.persistence.tables import answers_table

_upvote_count = func.cardinality(answers_table.c.upvoters)

_ANSWER_ORDER = {
    AnswerSort.HIGHEST_UPVOTES: (_upvote_count.desc(), answers_table.c.created_at.asc()),
    AnswerSort.LOWEST_UPVOTES: (_upvote_count.asc(), answers_table.c.created_at.asc()),
    AnswerSort.RECENT: (answers_table.c.created_at.desc(),),
    AnswerSort.OLD: (answers_table.c.created_at.asc(),),
}


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        with logfire.span("answer_repository.find_by_id", answer_id=str(answer_id)):
            stmt = select(answers_table).where(answers_table.c.id == answer_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return row_to_answer(row._asdict())

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSort = AnswerSort.OLD,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers to a question."""
        with logfire.span(
            "answer_repository.find_by_question",
            question_id=str(question_id),
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(answers_table)
                .where(answers_table.c.question_id == question_id)
                .order_by(*_ANSWER_ORDER[sort], answers_table.c.id.asc())
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            answers = [row_to_answer(row._asdict()) for row in result.fetchall()]
            logfire.info("Found answers", count=len(answers))
            return answers

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.question_id == question_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers by an author, most upvoted first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.author_id == author_id)
            .order_by(*_ANSWER_ORDER[AnswerSort.HIGHEST_UPVOTES], answers_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count answers by an author."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update content)."""
        with logfire.span("answer_repository.save", answer_id=str(answer.id)):
            exists = await self.session.scalar(
                select(answers_table.c.id).where(answers_table.c.id == answer.id)
            )

            if exists:
                stmt = (
                    answers_table.update()
                    .where(answers_table.c.id == answer.id)
                    .values(content=answer.content)
                )
            else:
                stmt = answers_table.insert().values(**answer_to_dict(answer))

            await self.session.execute(stmt)
            await self.session.flush()
            return answer

    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer."""
        stmt = answers_table.delete().where(answers_table.c.id == answer_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_question(self, question_id: QuestionId) -> None:
        """Delete every answer to a question."""
        stmt = answers_table.delete().where(answers_table.c.question_id == question_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def apply_vote(
        self, answer_id: AnswerId, update: VoteUpdate
    ) -> Optional[Answer]:
        """Apply a vote update with one UPDATE ... RETURNING statement."""
        with logfire.span(
            "answer_repository.apply_vote",
            answer_id=str(answer_id),
            user_id=str(update.user_id),
        ):
            stmt = (
                answers_table.update()
                .where(answers_table.c.id == answer_id)
                .values(**vote_values(answers_table, update))
                .returning(answers_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

            if row is None:
                return None

            return row_to_answer(row._asdict())
