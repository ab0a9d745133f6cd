"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import Any, List, Optional
from uuid import UUID

import logfire
from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from devflow.domain.model import Question
from devflow.domain.repository.question import (
    NEWEST_FIRST,
    QuestionCriteria,
    QuestionRepository,
    SortField,
    SortKey,
)
from devflow.domain.value import QuestionId, SetOperation, VoteUpdate
from devflow.persistence.mappers import question_to_dict, row_to_question
from devflow.persistence.tables import (
    question_tags_table,
    questions_table,
    tags_table,
)

# Columns written on insert only; afterwards they change through atomic updates
_COUNTER_COLUMNS = {"views", "answer_count", "upvoters", "downvoters"}


def voter_array_expression(column: Any, operation: SetOperation, user_id: UUID) -> Any:
    """Build the SQL expression for one voter array under a set operation.

    ``ADD`` removes the user before appending so the array never holds
    duplicates; ``REMOVE`` on an absent user leaves the array unchanged.

    Args:
        column: ``upvoters`` or ``downvoters`` column
        operation: Membership change
        user_id: Voting user

    Returns:
        Expression for the new array value
    """
    if operation == SetOperation.ADD:
        return func.array_append(func.array_remove(column, user_id), user_id)
    if operation == SetOperation.REMOVE:
        return func.array_remove(column, user_id)
    return column


def vote_values(table: Any, update: VoteUpdate) -> dict[str, Any]:
    """Column assignments applying a vote update in a single UPDATE."""
    upvoters, downvoters = update.stored_operations
    return {
        "upvoters": voter_array_expression(table.c.upvoters, upvoters, update.user_id),
        "downvoters": voter_array_expression(
            table.c.downvoters, downvoters, update.user_id
        ),
    }


LIKE_ESCAPE = "\\"


def like_pattern(search: str) -> str:
    """Substring pattern for ILIKE with wildcards in ``search`` escaped."""
    escaped = (
        search.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


_SORT_COLUMNS = {
    SortField.CREATED_AT: questions_table.c.created_at,
    SortField.VIEWS: questions_table.c.views,
    SortField.UPVOTES: func.cardinality(questions_table.c.upvoters),
    SortField.ANSWER_COUNT: questions_table.c.answer_count,
}


def _where_clauses(criteria: QuestionCriteria) -> list[ColumnElement[bool]]:
    clauses: list[ColumnElement[bool]] = []

    if criteria.author_id is not None:
        clauses.append(questions_table.c.author_id == criteria.author_id)

    if criteria.question_ids is not None:
        clauses.append(questions_table.c.id.in_(list(criteria.question_ids)))

    if criteria.tag is not None:
        tagged = (
            select(question_tags_table.c.question_id)
            .join(tags_table, question_tags_table.c.tag_id == tags_table.c.id)
            .where(func.lower(tags_table.c.name) == criteria.tag.root.lower())
        )
        clauses.append(questions_table.c.id.in_(tagged))

    if criteria.unanswered_only:
        clauses.append(questions_table.c.answer_count == 0)

    if criteria.search:
        pattern = like_pattern(criteria.search)
        if criteria.search_content:
            clauses.append(
                or_(
                    questions_table.c.title.ilike(pattern, escape=LIKE_ESCAPE),
                    questions_table.c.content.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        else:
            clauses.append(questions_table.c.title.ilike(pattern, escape=LIKE_ESCAPE))

    return clauses


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_questions(
        self, question_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tag names for multiple questions in a single query.

        Args:
            question_ids: List of question IDs

        Returns:
            Dict mapping question_id -> list of tag names
        """
        if not question_ids:
            return {}

        stmt = (
            select(question_tags_table.c.question_id, tags_table.c.name)
            .select_from(question_tags_table)
            .join(tags_table, question_tags_table.c.tag_id == tags_table.c.id)
            .where(question_tags_table.c.question_id.in_(question_ids))
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)

        tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            tag_map[row.question_id].append(row.name)

        return tag_map

    async def _to_questions(self, rows: list[Any]) -> List[Question]:
        tag_map = await self._fetch_tags_for_questions([row.id for row in rows])
        return [
            row_to_question(row._asdict(), tag_names=tag_map.get(row.id, []))
            for row in rows
        ]

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            questions = await self._to_questions([row])
            return questions[0]

    async def find_by_ids(self, question_ids: list[QuestionId]) -> List[Question]:
        """Find several questions in one query."""
        if not question_ids:
            return []
        stmt = select(questions_table).where(questions_table.c.id.in_(question_ids))
        result = await self.session.execute(stmt)
        return await self._to_questions(result.fetchall())

    async def find(
        self,
        criteria: QuestionCriteria,
        ordering: tuple[SortKey, ...] = NEWEST_FIRST,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions matching criteria, ordered and paginated."""
        with logfire.span("question_repository.find", limit=limit, offset=offset):
            order_by = []
            for key in ordering:
                column = _SORT_COLUMNS[key.field]
                order_by.append(column.desc() if key.descending else column.asc())
            # Stable pagination when sort keys tie
            order_by.append(questions_table.c.id.asc())

            stmt = (
                select(questions_table)
                .where(*_where_clauses(criteria))
                .order_by(*order_by)
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            rows = result.fetchall()

            if not rows:
                logfire.info("No questions found")
                return []

            questions = await self._to_questions(rows)
            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(self, criteria: QuestionCriteria) -> int:
        """Count questions matching criteria."""
        with logfire.span("question_repository.count"):
            stmt = (
                select(func.count())
                .select_from(questions_table)
                .where(*_where_clauses(criteria))
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            title=question.title,
        ):
            exists = await self.session.scalar(
                select(questions_table.c.id).where(questions_table.c.id == question.id)
            )
            question_dict = question_to_dict(question)

            if exists:
                values = {
                    key: value
                    for key, value in question_dict.items()
                    if key not in _COUNTER_COLUMNS and key != "id"
                }
                stmt = (
                    questions_table.update()
                    .where(questions_table.c.id == question.id)
                    .values(**values)
                )
            else:
                logfire.info("Inserting new question", question_id=str(question.id))
                stmt = questions_table.insert().values(**question_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return question

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question.

        Answers, tag links and saved entries are removed by ON DELETE CASCADE.
        """
        with logfire.span("question_repository.delete", question_id=str(question_id)):
            stmt = questions_table.delete().where(questions_table.c.id == question_id)
            await self.session.execute(stmt)
            await self.session.flush()

    async def apply_vote(
        self, question_id: QuestionId, update: VoteUpdate
    ) -> Optional[Question]:
        """Apply a vote update with one UPDATE ... RETURNING statement."""
        with logfire.span(
            "question_repository.apply_vote",
            question_id=str(question_id),
            user_id=str(update.user_id),
        ):
            stmt = (
                questions_table.update()
                .where(questions_table.c.id == question_id)
                .values(**vote_values(questions_table, update))
                .returning(questions_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

            if row is None:
                return None

            questions = await self._to_questions([row])
            return questions[0]

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically increment views by 1."""
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
            .returning(questions_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()

        if row is None:
            return None

        questions = await self._to_questions([row])
        return questions[0]

    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        """Atomically add delta to answer_count (minimum 0)."""
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question_id)
            .values(
                answer_count=func.greatest(questions_table.c.answer_count + delta, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
