"""Answer repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from devflow.domain.model.answer import Answer
from devflow.domain.value import AnswerId, QuestionId, UserId, VoteUpdate


class AnswerSort(str, Enum):
    """Sort order for a question's answers."""

    HIGHEST_UPVOTES = "highest_upvotes"  # upvotes DESC
    LOWEST_UPVOTES = "lowest_upvotes"  # upvotes ASC
    RECENT = "recent"  # created_at DESC
    OLD = "old"  # created_at ASC


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSort = AnswerSort.OLD,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers to a question.

        Args:
            question_id: The question ID
            sort: Sort order
            limit: Maximum number of answers to return
            offset: Number of answers to skip

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers by an author, most upvoted first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of answers to return
            offset: Number of answers to skip

        Returns:
            List of answers by the author
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count answers by an author."""
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer.

        Args:
            answer_id: The answer ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> None:
        """Delete every answer to a question.

        Args:
            question_id: The question ID
        """
        pass

    @abstractmethod
    async def apply_vote(
        self, answer_id: AnswerId, update: VoteUpdate
    ) -> Optional[Answer]:
        """Apply a vote update to the voter sets in a single atomic write.

        Args:
            answer_id: The answer ID
            update: Membership change computed by the vote coordinator

        Returns:
            The updated answer, or None if it doesn't exist
        """
        pass
