"""Unit tests for GetCurrentUserUseCase."""

from uuid import uuid4

import pytest

from knowspace.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from knowspace.domain.error import UnauthorizedError
from knowspace.domain.repository import UserRepository
from knowspace.domain.service import JWTService
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCurrentUser:
    """Tests for resolving the caller from a token."""

    @pytest.mark.asyncio
    async def test_valid_token_resolves_user(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCurrentUserUseCase)
        jwt_service = await unit_env.get(JWTService)
        user = await (await unit_env.get(UserRepository)).save(
            make_user("user1", is_admin=True)
        )
        token = jwt_service.create_token(str(user.id), "user1")

        # Act
        response = await use_case.execute(GetCurrentUserRequest(token=token))

        # Assert
        assert response.user_id == str(user.id)
        assert response.username == "user1"
        assert response.is_admin is True

    @pytest.mark.asyncio
    async def test_missing_token_unauthorized(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(UnauthorizedError, match="Authentication required"):
            await use_case.execute(GetCurrentUserRequest(token=None))

    @pytest.mark.asyncio
    async def test_invalid_token_unauthorized(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(UnauthorizedError, match="Invalid token"):
            await use_case.execute(GetCurrentUserRequest(token="garbage"))

    @pytest.mark.asyncio
    async def test_token_for_deleted_user_unauthorized(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token(str(uuid4()), "ghost")

        with pytest.raises(UnauthorizedError, match="no longer exists"):
            await use_case.execute(GetCurrentUserRequest(token=token))

    @pytest.mark.asyncio
    async def test_token_with_non_uuid_subject_unauthorized(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token("not-a-uuid", "odd")

        with pytest.raises(UnauthorizedError):
            await use_case.execute(GetCurrentUserRequest(token=token))
