"""Question repository interface and listing criteria."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from devflow.domain.model.question import Question
from devflow.domain.value import QuestionId, TagName, UserId, VoteUpdate


class SortField(str, Enum):
    """Question column a listing can be ordered by."""

    CREATED_AT = "created_at"
    VIEWS = "views"
    UPVOTES = "upvotes"
    ANSWER_COUNT = "answer_count"


@dataclass(frozen=True)
class SortKey:
    """One ordering term."""

    field: SortField
    descending: bool = True


NEWEST_FIRST = (SortKey(SortField.CREATED_AT),)


class QuestionFilter(str, Enum):
    """Filter options for question listings.

    Every member maps to an explicit ordering and, for ``unanswered``, a
    predicate. Values outside this set are rejected at the API boundary.
    """

    NEWEST = "newest"
    RECOMMENDED = "recommended"
    FREQUENT = "frequent"
    UNANSWERED = "unanswered"
    MOST_RECENT = "most_recent"
    OLDEST = "oldest"
    MOST_VIEWED = "most_viewed"
    MOST_VOTED = "most_voted"
    MOST_ANSWERED = "most_answered"

    @property
    def ordering(self) -> tuple[SortKey, ...]:
        return _FILTER_ORDERING[self]

    @property
    def unanswered_only(self) -> bool:
        return self is QuestionFilter.UNANSWERED


_FILTER_ORDERING: dict[QuestionFilter, tuple[SortKey, ...]] = {
    QuestionFilter.NEWEST: NEWEST_FIRST,
    # No recommendation engine; recommended falls back to newest
    QuestionFilter.RECOMMENDED: NEWEST_FIRST,
    QuestionFilter.MOST_RECENT: NEWEST_FIRST,
    QuestionFilter.UNANSWERED: NEWEST_FIRST,
    QuestionFilter.FREQUENT: (SortKey(SortField.VIEWS),),
    QuestionFilter.MOST_VIEWED: (SortKey(SortField.VIEWS),),
    QuestionFilter.OLDEST: (SortKey(SortField.CREATED_AT, descending=False),),
    QuestionFilter.MOST_VOTED: (SortKey(SortField.UPVOTES),),
    QuestionFilter.MOST_ANSWERED: (SortKey(SortField.ANSWER_COUNT),),
}


@dataclass(frozen=True)
class QuestionCriteria:
    """Predicates for a question listing. All set fields must match.

    Attributes:
        author_id: Only questions by this author
        question_ids: Only questions with these ids (e.g. a user's collection)
        tag: Only questions carrying this tag (case-insensitive)
        unanswered_only: Only questions with no answers
        search: Case-insensitive substring to look for
        search_content: Match ``search`` against content as well as title
    """

    author_id: Optional[UserId] = None
    question_ids: Optional[frozenset[QuestionId]] = None
    tag: Optional[TagName] = None
    unanswered_only: bool = False
    search: Optional[str] = None
    search_content: bool = False


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, question_ids: list[QuestionId]) -> List[Question]:
        """Find several questions in one query. Missing ids are skipped."""
        pass

    @abstractmethod
    async def find(
        self,
        criteria: QuestionCriteria,
        ordering: tuple[SortKey, ...] = NEWEST_FIRST,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions matching criteria, ordered and paginated.

        Args:
            criteria: Predicates to apply
            ordering: Sort terms, most significant first
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of matching questions
        """
        pass

    @abstractmethod
    async def count(self, criteria: QuestionCriteria) -> int:
        """Count questions matching criteria.

        Args:
            criteria: Predicates to apply

        Returns:
            Total number of matching questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update), including its tag links.

        Voter sets, views and answer count are written on insert only; after
        that they change through the atomic operations below.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question row.

        Args:
            question_id: The question ID to delete
        """
        pass

    @abstractmethod
    async def apply_vote(
        self, question_id: QuestionId, update: VoteUpdate
    ) -> Optional[Question]:
        """Apply a vote update to the voter sets in a single atomic write.

        Args:
            question_id: The question ID
            update: Membership change computed by the vote coordinator

        Returns:
            The updated question, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically increment the view counter.

        Returns:
            The updated question, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        """Atomically add ``delta`` to the answer count (never below 0).

        Args:
            question_id: The question ID
            delta: Amount to add, negative to subtract
        """
        pass
