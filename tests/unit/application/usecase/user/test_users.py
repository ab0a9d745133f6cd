"""Unit tests for the user use cases."""

from uuid import uuid4

import pytest

from devflow.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    ToggleSaveQuestionRequest,
    ToggleSaveQuestionUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from devflow.domain.error import ConflictError, NotFoundError
from devflow.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from devflow.domain.value import UserId
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateUser:
    """Tests for CreateUserUseCase."""

    @pytest.mark.asyncio
    async def test_create_user(self, unit_env):
        use_case = await unit_env.get(CreateUserUseCase)

        response = await use_case.execute(
            CreateUserRequest(
                clerk_id="user_2abc",
                name="Jane Doe",
                username="jane",
                email="jane@example.com",
                picture="https://img.example.com/jane.png",
            )
        )

        assert response.clerk_id == "user_2abc"
        assert response.username == "jane"

    @pytest.mark.asyncio
    async def test_malformed_username(self, unit_env):
        use_case = await unit_env.get(CreateUserUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                CreateUserRequest(
                    clerk_id="user_2abc",
                    name="Jane Doe",
                    username="no spaces allowed",
                    email="jane@example.com",
                )
            )


class TestGetUserProfile:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile_totals(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        user = await user_repo.save(make_user("jane"))
        question = await question_repo.save(make_question(user.id))
        await question_repo.save(make_question(user.id, title="Second question"))
        await question_repo.save(make_question(UserId(uuid4()), title="Not hers"))
        await answer_repo.save(make_answer(question.id, user.id))
        use_case = await unit_env.get(GetUserProfileUseCase)

        response = await use_case.execute(GetUserProfileRequest(clerk_id="user_jane"))

        assert response.username == "jane"
        assert response.total_questions == 2
        assert response.total_answers == 1

    @pytest.mark.asyncio
    async def test_unknown_clerk_id(self, unit_env):
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(clerk_id="user_missing"))


class TestUpdateUserProfile:
    """Tests for UpdateUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_profile(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("jane"))
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        response = await use_case.execute(
            UpdateUserProfileRequest(
                user_id=str(user.id),
                bio="Backend developer",
                portfolio_website="https://jane.dev",
                path="/profile/edit",
            )
        )

        assert response.bio == "Backend developer"
        assert response.portfolio_website == "https://jane.dev"
        assert response.username == "jane"
        assert response.affected_views == ["/profile/edit", "/profile/user_jane"]

        stored = await user_repo.find_by_id(user.id)
        assert stored.bio == "Backend developer"

    @pytest.mark.asyncio
    async def test_username_taken(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("jane"))
        await user_repo.save(make_user("john"))
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        with pytest.raises(ConflictError):
            await use_case.execute(
                UpdateUserProfileRequest(user_id=str(user.id), username="john")
            )


class TestToggleSaveQuestion:
    """Tests for ToggleSaveQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_toggle(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        user = await user_repo.save(make_user())
        question = await question_repo.save(make_question(UserId(uuid4())))
        use_case = await unit_env.get(ToggleSaveQuestionUseCase)
        request = ToggleSaveQuestionRequest(
            user_id=str(user.id), question_id=str(question.id), path=f"/question/{question.id}"
        )

        saved = await use_case.execute(request)
        unsaved = await use_case.execute(request)

        assert saved.saved is True
        assert unsaved.saved is False
        assert saved.affected_views == [f"/question/{question.id}", "/collection"]

    @pytest.mark.asyncio
    async def test_missing_question(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())
        use_case = await unit_env.get(ToggleSaveQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ToggleSaveQuestionRequest(user_id=str(user.id), question_id=str(uuid4()))
            )
