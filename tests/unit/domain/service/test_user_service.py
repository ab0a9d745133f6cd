"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from devflow.domain.error import ConflictError, NotFoundError
from devflow.domain.repository import UserRepository
from devflow.domain.service import UserService
from devflow.domain.value import ClerkId, QuestionId, UserId, Username
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateUser:
    """Tests for create_user."""

    @pytest.mark.asyncio
    async def test_create_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        user = await user_service.create_user(
            clerk_id=ClerkId("user_123"),
            name="Jane Doe",
            username=Username("jane"),
            email="jane@example.com",
        )

        assert user.reputation == 0
        fetched = await user_service.get_by_clerk_id(ClerkId("user_123"))
        assert fetched.id == user.id

    @pytest.mark.asyncio
    async def test_duplicate_clerk_id_conflicts(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("jane", clerk_id="user_123"))

        with pytest.raises(ConflictError, match="clerk_id"):
            await user_service.create_user(
                clerk_id=ClerkId("user_123"),
                name="Other",
                username=Username("other"),
                email="other@example.com",
            )

    @pytest.mark.asyncio
    async def test_duplicate_username_conflicts_ignoring_case(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("jane"))

        with pytest.raises(ConflictError, match="username"):
            await user_service.create_user(
                clerk_id=ClerkId("user_999"),
                name="Jane Again",
                username=Username("JANE"),
                email="jane2@example.com",
            )


class TestUpdateProfile:
    """Tests for update_profile."""

    @pytest.mark.asyncio
    async def test_none_leaves_fields_unchanged(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("jane"))

        updated = await user_service.update_profile(user.id, location="Lisbon")

        assert updated.location == "Lisbon"
        assert updated.name == user.name
        assert updated.username == user.username

    @pytest.mark.asyncio
    async def test_taking_another_users_username_conflicts(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("jane"))
        await user_repo.save(make_user("bob"))

        with pytest.raises(ConflictError):
            await user_service.update_profile(user.id, username=Username("bob"))

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.update_profile(UserId(uuid4()), bio="hello")


class TestCollections:
    """Tests for saved questions."""

    @pytest.mark.asyncio
    async def test_toggle_adds_then_removes(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_id = UserId(uuid4())
        question_id = QuestionId(uuid4())

        assert await user_service.toggle_saved_question(user_id, question_id) is True
        assert await user_service.has_saved_question(user_id, question_id) is True

        assert await user_service.toggle_saved_question(user_id, question_id) is False
        assert await user_service.has_saved_question(user_id, question_id) is False

    @pytest.mark.asyncio
    async def test_remove_question_from_all_collections(self, unit_env):
        user_service = await unit_env.get(UserService)
        alice, bob = UserId(uuid4()), UserId(uuid4())
        question_id = QuestionId(uuid4())
        kept = QuestionId(uuid4())
        await user_service.toggle_saved_question(alice, question_id)
        await user_service.toggle_saved_question(bob, question_id)
        await user_service.toggle_saved_question(bob, kept)

        await user_service.remove_question_from_collections(question_id)

        assert await user_service.get_saved_question_ids(alice) == []
        assert await user_service.get_saved_question_ids(bob) == [kept]
