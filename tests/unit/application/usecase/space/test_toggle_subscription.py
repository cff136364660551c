"""Unit tests for ToggleSubscriptionUseCase."""

from uuid import uuid4

import pytest

from knowspace.application.usecase.space import (
    ToggleSubscriptionRequest,
    ToggleSubscriptionUseCase,
)
from knowspace.domain.error import InvalidInputError
from knowspace.domain.repository import SpaceRepository
from tests.conftest import make_space
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleSubscriptionUseCase:
    """Tests for ToggleSubscriptionUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_flips_state(self, unit_env):
        use_case = await unit_env.get(ToggleSubscriptionUseCase)
        space = await (await unit_env.get(SpaceRepository)).save(make_space("Geology"))
        request = ToggleSubscriptionRequest(user_id=str(uuid4()), space_id=str(space.id))

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first.subscribed is True
        assert second.subscribed is False
        assert first.space_id == str(space.id)

    @pytest.mark.asyncio
    async def test_malformed_space_id_rejected(self, unit_env):
        use_case = await unit_env.get(ToggleSubscriptionUseCase)

        with pytest.raises(InvalidInputError, match="space_id"):
            await use_case.execute(
                ToggleSubscriptionRequest(user_id=str(uuid4()), space_id="nope")
            )
