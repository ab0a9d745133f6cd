"""Tag repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from devflow.domain.model.tag import Tag
from devflow.domain.value import QuestionId, TagId, TagName


class TagSort(str, Enum):
    """Sort order for tag listings."""

    POPULAR = "popular"  # question_count DESC
    RECENT = "recent"  # created_at DESC
    NAME = "name"  # name ASC
    OLD = "old"  # created_at ASC


class TagRepository(ABC):
    """Repository interface for Tag entity."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name, ignoring case.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names (case-insensitive) in a single query.

        Args:
            names: List of tag names

        Returns:
            List of found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        sort: TagSort = TagSort.POPULAR,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Tag]:
        """Find tags, optionally filtered by a name substring.

        Args:
            search: Case-insensitive substring of the tag name
            sort: Sort order
            limit: Maximum number of tags to return
            offset: Number of tags to skip

        Returns:
            List of tags with ``question_count`` populated
        """
        pass

    @abstractmethod
    async def count(self, search: Optional[str] = None) -> int:
        """Count tags, optionally filtered by a name substring."""
        pass

    @abstractmethod
    async def link_question(self, tag_id: TagId, question_id: QuestionId) -> None:
        """Attach a question to a tag. Linking twice is a no-op.

        Args:
            tag_id: Tag identifier
            question_id: Question identifier
        """
        pass

    @abstractmethod
    async def unlink_question(self, question_id: QuestionId) -> None:
        """Detach a question from every tag.

        Args:
            question_id: Question identifier
        """
        pass
