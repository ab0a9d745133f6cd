"""Tag domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from devflow.domain.error import NotFoundError
from devflow.domain.model.tag import Tag
from devflow.domain.repository.tag import TagRepository, TagSort
from devflow.domain.value import QuestionId, TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def get_or_create_tags(self, tag_names: list[TagName]) -> list[Tag]:
        """Resolve tag names to tags, creating the ones that don't exist.

        Names are matched case-insensitively. A new tag keeps the spelling
        it was first written with.

        Args:
            tag_names: Tag names from a question

        Returns:
            One tag per distinct name, in input order
        """
        with logfire.span(
            "tag_service.get_or_create_tags", tags=[t.root for t in tag_names]
        ):
            unique: dict[str, TagName] = {}
            for name in tag_names:
                unique.setdefault(name.key, name)

            existing = await self.tag_repository.find_by_names(list(unique.values()))
            by_key = {tag.name.key: tag for tag in existing}

            tags = []
            for key, name in unique.items():
                tag = by_key.get(key)
                if tag is None:
                    tag = await self.tag_repository.save(
                        Tag(id=TagId(uuid4()), name=name, created_at=datetime.now())
                    )
                    logfire.info("Tag created", tag_name=name.root)
                tags.append(tag)

            return tags

    async def get_by_id(self, tag_id: TagId) -> Tag:
        """Get a tag by ID.

        Raises:
            NotFoundError: If tag not found
        """
        with logfire.span("tag_service.get_by_id", tag_id=str(tag_id)):
            tag = await self.tag_repository.find_by_id(tag_id)
            if not tag:
                logfire.warn("Tag not found", tag_id=str(tag_id))
                raise NotFoundError("Tag", str(tag_id))
            return tag

    async def link_question(self, tags: list[Tag], question_id: QuestionId) -> None:
        """Attach a question to each of the given tags."""
        with logfire.span(
            "tag_service.link_question",
            question_id=str(question_id),
            tags=[t.name.root for t in tags],
        ):
            for tag in tags:
                await self.tag_repository.link_question(tag.id, question_id)

    async def unlink_question(self, question_id: QuestionId) -> None:
        """Detach a question from all of its tags."""
        with logfire.span("tag_service.unlink_question", question_id=str(question_id)):
            await self.tag_repository.unlink_question(question_id)

    async def list_tags(
        self,
        search: Optional[str] = None,
        sort: TagSort = TagSort.POPULAR,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Tag], int]:
        """List tags with their question counts.

        Args:
            search: Case-insensitive substring of the tag name
            sort: Sort order
            limit: Maximum number of tags to return
            offset: Number of tags to skip

        Returns:
            Tuple of (tags for this page, total matching tags)
        """
        with logfire.span(
            "tag_service.list_tags",
            search=search,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            total = await self.tag_repository.count(search=search)
            tags = await self.tag_repository.find_all(
                search=search, sort=sort, limit=limit, offset=offset
            )
            logfire.info("Tags listed", count=len(tags), total=total)
            return tags, total
