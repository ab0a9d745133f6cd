"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from devflow.domain.model.user import User
from devflow.domain.value import ClerkId, QuestionId, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations, including the
    user's collection of saved questions. Implementations live in the
    infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users in one query. Missing ids are skipped."""
        pass

    @abstractmethod
    async def find_by_clerk_id(self, clerk_id: ClerkId) -> Optional[User]:
        """Find a user by their identity provider id.

        Args:
            clerk_id: The identity provider's user id

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def find_saved_question_ids(self, user_id: UserId) -> list[QuestionId]:
        """List the ids of the questions in a user's collection."""
        pass

    @abstractmethod
    async def has_saved_question(self, user_id: UserId, question_id: QuestionId) -> bool:
        """Check whether a question is in a user's collection."""
        pass

    @abstractmethod
    async def add_saved_question(self, user_id: UserId, question_id: QuestionId) -> None:
        """Add a question to a user's collection. Adding twice is a no-op.

        Args:
            user_id: The user's unique identifier
            question_id: The question to save
        """
        pass

    @abstractmethod
    async def remove_saved_question(
        self, user_id: UserId, question_id: QuestionId
    ) -> bool:
        """Remove a question from a user's collection.

        Args:
            user_id: The user's unique identifier
            question_id: The question to remove

        Returns:
            True if the question was in the collection, False otherwise
        """
        pass

    @abstractmethod
    async def remove_question_from_collections(self, question_id: QuestionId) -> None:
        """Remove a question from every user's collection.

        Args:
            question_id: The question being deleted
        """
        pass
