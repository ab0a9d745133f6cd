"""Unit tests for GetCurrentUserUseCase."""

import pytest

from devflow.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from devflow.domain.error import NotFoundError
from devflow.domain.repository import UserRepository
from devflow.domain.service import JWTService
from devflow.util.jwt import JWTError
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCurrentUser:
    """Tests for resolving the bearer of a session token."""

    @pytest.mark.asyncio
    async def test_resolves_user_by_token_subject(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        jwt_service = await unit_env.get(JWTService)
        user = await user_repo.save(make_user("jane"))
        token = jwt_service.create_token(user.clerk_id)
        use_case = await unit_env.get(GetCurrentUserUseCase)

        response = await use_case.execute(GetCurrentUserRequest(token=token))

        assert response.user_id == str(user.id)
        assert response.username == "jane"

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="not-a-jwt"))

    @pytest.mark.asyncio
    async def test_token_for_unknown_user(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetCurrentUserRequest(token=jwt_service.create_token("user_ghost"))
            )
