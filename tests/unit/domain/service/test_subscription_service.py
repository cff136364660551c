"""Unit tests for SubscriptionService."""

from uuid import uuid4

import pytest

from knowspace.domain.error import ConstraintConflictError, NotFoundError
from knowspace.domain.repository import (
    AlertRepository,
    SpaceRepository,
    SubscriptionRepository,
)
from knowspace.domain.service import SubscriptionService
from knowspace.domain.value import AlertType, SpaceId, UserId
from tests.conftest import make_space
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class StaleSubscriptionReads:
    """Subscription repository whose lookups miss a concurrent subscribe."""

    def __init__(self, inner: SubscriptionRepository) -> None:
        self._inner = inner

    async def find_by_user_and_space(self, user_id, space_id):
        return None

    def __getattr__(self, name):
        return getattr(self._inner, name)


class TestToggleSubscription:
    """Tests for toggle_subscription."""

    @pytest.mark.asyncio
    async def test_first_toggle_subscribes_and_raises_alert(self, unit_env):
        # Arrange
        service = await unit_env.get(SubscriptionService)
        space = await (await unit_env.get(SpaceRepository)).save(
            make_space("What is Ecology?")
        )
        user_id = UserId(uuid4())

        # Act
        subscribed = await service.toggle_subscription(user_id, space.id)

        # Assert
        assert subscribed is True
        subscriptions = await unit_env.get(SubscriptionRepository)
        assert await subscriptions.find_space_ids_by_user(user_id) == {space.id}

        alerts = await (await unit_env.get(AlertRepository)).find_by_space(space.id)
        assert len(alerts) == 1
        assert alerts[0].type is AlertType.SUBSCRIPTION
        assert alerts[0].user_id == user_id
        assert alerts[0].message == "New member joined What is Ecology?"
        assert alerts[0].is_read is False

    @pytest.mark.asyncio
    async def test_second_toggle_unsubscribes_without_new_alert(self, unit_env):
        service = await unit_env.get(SubscriptionService)
        space = await (await unit_env.get(SpaceRepository)).save(make_space("Physics"))
        user_id = UserId(uuid4())

        await service.toggle_subscription(user_id, space.id)
        subscribed = await service.toggle_subscription(user_id, space.id)

        assert subscribed is False
        subscriptions = await unit_env.get(SubscriptionRepository)
        assert await subscriptions.find_space_ids_by_user(user_id) == set()
        alerts = await (await unit_env.get(AlertRepository)).find_by_space(space.id)
        assert len(alerts) == 1

    @pytest.mark.asyncio
    async def test_resubscribing_works(self, unit_env):
        service = await unit_env.get(SubscriptionService)
        space = await (await unit_env.get(SpaceRepository)).save(make_space("Maths"))
        user_id = UserId(uuid4())

        results = [await service.toggle_subscription(user_id, space.id) for _ in range(3)]

        assert results == [True, False, True]
        subscribers = await service.list_subscribers(space.id)
        assert [s.user_id for s in subscribers] == [user_id]

    @pytest.mark.asyncio
    async def test_unknown_space_raises_not_found(self, unit_env):
        service = await unit_env.get(SubscriptionService)

        with pytest.raises(NotFoundError):
            await service.toggle_subscription(UserId(uuid4()), SpaceId(uuid4()))

        subscriptions = await unit_env.get(SubscriptionRepository)
        assert await subscriptions.find_space_ids_by_user(UserId(uuid4())) == set()

    @pytest.mark.asyncio
    async def test_concurrent_subscribe_conflicts_on_unique_constraint(self, unit_env):
        # Arrange
        service = await unit_env.get(SubscriptionService)
        space = await (await unit_env.get(SpaceRepository)).save(make_space("Botany"))
        user_id = UserId(uuid4())
        await service.toggle_subscription(user_id, space.id)
        service.subscription_repository = StaleSubscriptionReads(
            service.subscription_repository
        )

        # Act
        with pytest.raises(ConstraintConflictError, match="already subscribed"):
            await service.toggle_subscription(user_id, space.id)

        # Assert
        subscribers = await service.list_subscribers(space.id)
        assert [s.user_id for s in subscribers] == [user_id]
        alerts = await (await unit_env.get(AlertRepository)).find_by_space(space.id)
        assert len(alerts) == 1
