"""In-memory tag repository for testing."""

from typing import Optional

from devflow.domain.model.tag import Tag
from devflow.domain.repository.tag import TagRepository, TagSort
from devflow.domain.value import QuestionId, TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        self._tags: dict[TagId, Tag] = {}
        self._questions: dict[TagId, set[QuestionId]] = {}

    def _with_count(self, tag: Tag) -> Tag:
        return tag.model_copy(
            update={"question_count": len(self._questions.get(tag.id, set()))}
        )

    def _search(self, search: Optional[str]) -> list[Tag]:
        tags = list(self._tags.values())
        if search:
            needle = search.casefold()
            tags = [t for t in tags if needle in t.name.key]
        return [self._with_count(t) for t in tags]

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        self._tags[tag.id] = tag
        return self._with_count(tag)

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        tag = self._tags.get(tag_id)
        return self._with_count(tag) if tag else None

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name, ignoring case."""
        for tag in self._tags.values():
            if tag.name.key == name.key:
                return self._with_count(tag)
        return None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        keys = {name.key for name in names}
        return [self._with_count(t) for t in self._tags.values() if t.name.key in keys]

    async def find_all(
        self,
        search: Optional[str] = None,
        sort: TagSort = TagSort.POPULAR,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Tag]:
        """Find tags, optionally filtered by a name substring."""
        tags = self._search(search)
        if sort == TagSort.POPULAR:
            tags.sort(key=lambda t: t.name.root)
            tags.sort(key=lambda t: t.question_count, reverse=True)
        elif sort == TagSort.RECENT:
            tags.sort(key=lambda t: t.created_at, reverse=True)
        elif sort == TagSort.NAME:
            tags.sort(key=lambda t: t.name.key)
        elif sort == TagSort.OLD:
            tags.sort(key=lambda t: t.created_at)
        return tags[offset : offset + limit]

    async def count(self, search: Optional[str] = None) -> int:
        """Count tags, optionally filtered by a name substring."""
        return len(self._search(search))

    async def link_question(self, tag_id: TagId, question_id: QuestionId) -> None:
        """Attach a question to a tag."""
        self._questions.setdefault(tag_id, set()).add(question_id)

    async def unlink_question(self, question_id: QuestionId) -> None:
        """Detach a question from every tag."""
        for question_ids in self._questions.values():
            question_ids.discard(question_id)
