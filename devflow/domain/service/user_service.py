"""User domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from devflow.domain.error import ConflictError, NotFoundError
from devflow.domain.model import User
from devflow.domain.repository import UserRepository
from devflow.domain.value import ClerkId, QuestionId, UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user profiles and collections."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_clerk_id(self, clerk_id: ClerkId) -> User:
        """Get user by identity provider id.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_clerk_id", clerk_id=clerk_id):
            user = await self.user_repository.find_by_clerk_id(clerk_id)
            if not user:
                logfire.warn("User not found", clerk_id=clerk_id)
                raise NotFoundError("User", clerk_id)
            return user

    async def get_users_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch fetch users, keyed by id."""
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(set(user_ids)))
        return {user.id: user for user in users}

    async def create_user(
        self,
        clerk_id: ClerkId,
        name: str,
        username: Username,
        email: str,
        picture: Optional[str] = None,
    ) -> User:
        """Create a local profile for a new identity provider account.

        Args:
            clerk_id: Identity provider user id
            name: Display name
            username: Unique username
            email: Email address
            picture: Avatar URL

        Returns:
            Created user

        Raises:
            ConflictError: If the clerk id or username is already taken
        """
        with logfire.span(
            "user_service.create_user", clerk_id=clerk_id, username=username.root
        ):
            if await self.user_repository.find_by_clerk_id(clerk_id):
                logfire.warn("Duplicate clerk id", clerk_id=clerk_id)
                raise ConflictError("User", "clerk_id", clerk_id)
            if await self.user_repository.find_by_username(username):
                logfire.warn("Duplicate username", username=username.root)
                raise ConflictError("User", "username", username.root)

            user = User(
                id=UserId(uuid4()),
                clerk_id=clerk_id,
                name=name,
                username=username,
                email=email,
                picture=picture,
                joined_at=datetime.now(),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id), clerk_id=clerk_id)
            return saved

    async def update_profile(
        self,
        user_id: UserId,
        name: Optional[str] = None,
        username: Optional[Username] = None,
        bio: Optional[str] = None,
        location: Optional[str] = None,
        portfolio_website: Optional[str] = None,
    ) -> User:
        """Update the editable profile fields. ``None`` leaves a field as is.

        Raises:
            NotFoundError: If user not found
            ConflictError: If the new username belongs to someone else
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            if username is not None and username != user.username:
                other = await self.user_repository.find_by_username(username)
                if other and other.id != user.id:
                    raise ConflictError("User", "username", username.root)

            updates = {
                "name": name,
                "username": username,
                "bio": bio,
                "location": location,
                "portfolio_website": portfolio_website,
            }
            updates = {key: value for key, value in updates.items() if value is not None}

            # model_copy skips validation, so re-validate the merged profile
            updated = User.model_validate({**user.model_dump(), **updates})
            saved = await self.user_repository.save(updated)
            logfire.info(
                "User profile updated", user_id=str(user_id), fields=sorted(updates)
            )
            return saved

    async def has_saved_question(
        self, user_id: UserId, question_id: QuestionId
    ) -> bool:
        return await self.user_repository.has_saved_question(user_id, question_id)

    async def get_saved_question_ids(self, user_id: UserId) -> list[QuestionId]:
        return await self.user_repository.find_saved_question_ids(user_id)

    async def toggle_saved_question(
        self, user_id: UserId, question_id: QuestionId
    ) -> bool:
        """Add a question to the user's collection, or remove it if present.

        Args:
            user_id: User ID
            question_id: Question ID

        Returns:
            True if the question is now saved, False if it was removed
        """
        with logfire.span(
            "user_service.toggle_saved_question",
            user_id=str(user_id),
            question_id=str(question_id),
        ):
            removed = await self.user_repository.remove_saved_question(
                user_id, question_id
            )
            if removed:
                logfire.info("Question removed from collection", user_id=str(user_id))
                return False

            await self.user_repository.add_saved_question(user_id, question_id)
            logfire.info("Question added to collection", user_id=str(user_id))
            return True

    async def remove_question_from_collections(self, question_id: QuestionId) -> None:
        with logfire.span(
            "user_service.remove_question_from_collections",
            question_id=str(question_id),
        ):
            await self.user_repository.remove_question_from_collections(question_id)
