"""In-memory user repository for testing."""

from typing import Optional

from devflow.domain.model.user import User
from devflow.domain.repository.user import UserRepository
from devflow.domain.value import ClerkId, QuestionId, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._saved: dict[UserId, list[QuestionId]] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users by ID."""
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def find_by_clerk_id(self, clerk_id: ClerkId) -> Optional[User]:
        """Find a user by their identity provider id."""
        for user in self._users.values():
            if user.clerk_id == clerk_id:
                return user
        return None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, ignoring case."""
        for user in self._users.values():
            if user.username.root.lower() == username.root.lower():
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def find_saved_question_ids(self, user_id: UserId) -> list[QuestionId]:
        """List a user's saved question ids, most recently saved first."""
        return list(reversed(self._saved.get(user_id, [])))

    async def has_saved_question(self, user_id: UserId, question_id: QuestionId) -> bool:
        """Check whether a question is in a user's collection."""
        return question_id in self._saved.get(user_id, [])

    async def add_saved_question(self, user_id: UserId, question_id: QuestionId) -> None:
        """Add a question to a user's collection."""
        saved = self._saved.setdefault(user_id, [])
        if question_id not in saved:
            saved.append(question_id)

    async def remove_saved_question(
        self, user_id: UserId, question_id: QuestionId
    ) -> bool:
        """Remove a question from a user's collection."""
        saved = self._saved.get(user_id, [])
        if question_id in saved:
            saved.remove(question_id)
            return True
        return False

    async def remove_question_from_collections(self, question_id: QuestionId) -> None:
        """Remove a question from every user's collection."""
        for saved in self._saved.values():
            if question_id in saved:
                saved.remove(question_id)
