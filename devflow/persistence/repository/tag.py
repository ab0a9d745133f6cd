"""PostgreSQL implementation of Tag repository."""

from typing import Any, Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from devflow.domain.model.tag import Tag
from devflow.domain.repository.tag import TagRepository, TagSort
from devflow.domain.value import QuestionId, TagId, TagName
from devflow.persistence.mappers import row_to_tag, tag_to_dict
from devflow.persistence.repository.question import LIKE_ESCAPE, like_pattern
from devflow.persistence.tables import question_tags_table, tags_table

_question_count = (
    select(func.count())
    .where(question_tags_table.c.tag_id == tags_table.c.id)
    .correlate(tags_table)
    .scalar_subquery()
    .label("question_count")
)

_TAG_ORDER = {
    TagSort.POPULAR: (_question_count.desc(), tags_table.c.name.asc()),
    TagSort.RECENT: (tags_table.c.created_at.desc(),),
    TagSort.NAME: (func.lower(tags_table.c.name).asc(),),
    TagSort.OLD: (tags_table.c.created_at.asc(),),
}


def _with_count() -> Any:
    return select(tags_table, _question_count)


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        with logfire.span("tag_repository.save", tag_name=tag.name.root):
            tag_dict = tag_to_dict(tag)
            stmt = insert(tags_table).values(**tag_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[tags_table.c.id],
                set_={"description": stmt.excluded.description},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = _with_count().where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name, ignoring case."""
        stmt = _with_count().where(func.lower(tags_table.c.name) == name.root.lower())
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []
        stmt = _with_count().where(
            func.lower(tags_table.c.name).in_([name.root.lower() for name in names])
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_all(
        self,
        search: Optional[str] = None,
        sort: TagSort = TagSort.POPULAR,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Tag]:
        """Find tags, optionally filtered by a name substring."""
        with logfire.span(
            "tag_repository.find_all",
            search=search,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = _with_count()
            if search:
                stmt = stmt.where(
                    tags_table.c.name.ilike(like_pattern(search), escape=LIKE_ESCAPE)
                )
            stmt = (
                stmt.order_by(*_TAG_ORDER[sort], tags_table.c.id.asc())
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def count(self, search: Optional[str] = None) -> int:
        """Count tags, optionally filtered by a name substring."""
        stmt = select(func.count()).select_from(tags_table)
        if search:
            stmt = stmt.where(
                tags_table.c.name.ilike(like_pattern(search), escape=LIKE_ESCAPE)
            )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def link_question(self, tag_id: TagId, question_id: QuestionId) -> None:
        """Attach a question to a tag."""
        stmt = (
            insert(question_tags_table)
            .values(tag_id=tag_id, question_id=question_id)
            .on_conflict_do_nothing()
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def unlink_question(self, question_id: QuestionId) -> None:
        """Detach a question from every tag."""
        stmt = question_tags_table.delete().where(
            question_tags_table.c.question_id == question_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
