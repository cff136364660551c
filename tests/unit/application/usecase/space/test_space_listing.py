"""Unit tests for the space listing use cases."""

from uuid import uuid4

import pytest

from knowspace.application.usecase.space import (
    GetAllSpacesRequest,
    GetAllSpacesUseCase,
    GetSpaceRequest,
    GetSpaceTitlesUseCase,
    GetSpaceUseCase,
    GetSubscribedHierarchyRequest,
    GetSubscribedHierarchyUseCase,
    GetSubscribedSpacesRequest,
    GetSubscribedSpacesUseCase,
)
from knowspace.domain.error import NotFoundError
from knowspace.domain.model import Alert, SpaceContribution
from knowspace.domain.repository import (
    AlertRepository,
    ArticleRepository,
    CommentRepository,
    ContributionRepository,
    FlashcardRepository,
    SpaceRepository,
    UserRepository,
)
from knowspace.domain.service import SubscriptionService
from knowspace.domain.value import (
    AlertId,
    AlertType,
    ArticleRef,
    ContributionId,
)
from tests.conftest import (
    make_article,
    make_comment,
    make_flashcard,
    make_space,
    make_user,
    tick,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed_world(env):
    """Two users, the demo hierarchy, content in Ecology and a subscription."""
    users = await env.get(UserRepository)
    admin = await users.save(make_user("user1", is_admin=True))
    member = await users.save(make_user("user2"))

    spaces = await env.get(SpaceRepository)
    biology = await spaces.save(make_space("The Science of Biology"))
    biosphere = await spaces.save(make_space("The Biosphere"))
    ecology = await spaces.save(make_space("What is Ecology?", 2, biosphere))
    energy = await spaces.save(make_space("Energy Flow", 3, ecology))

    article = await (await env.get(ArticleRepository)).save(
        make_article(admin, ecology, "Ecosystems")
    )
    await (await env.get(FlashcardRepository)).save(
        make_flashcard(admin, ecology, "Biome")
    )
    await (await env.get(CommentRepository)).save(
        make_comment(member, ArticleRef(id=article.id), "Nice")
    )
    await (await env.get(ContributionRepository)).save(
        SpaceContribution(
            id=ContributionId(uuid4()),
            user_id=admin.id,
            space_id=ecology.id,
            created_at=tick(),
        )
    )

    # Subscribing raises an unread alert for the member
    await (await env.get(SubscriptionService)).toggle_subscription(
        member.id, ecology.id
    )
    return admin, member, biology, biosphere, ecology, energy


class TestGetAllSpaces:
    """Tests for GetAllSpacesUseCase."""

    @pytest.mark.asyncio
    async def test_every_space_decorated(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetAllSpacesUseCase)
        admin, member, *_ = await seed_world(unit_env)

        # Act
        response = await use_case.execute(GetAllSpacesRequest(user_id=str(member.id)))

        # Assert
        assert response.total == 4
        ecology = next(s for s in response.spaces if s.name == "What is Ecology?")
        assert [a.title for a in ecology.articles] == ["Ecosystems"]
        assert [f.title for f in ecology.flashcards] == ["Biome"]
        assert [c.text for c in ecology.articles[0].comments] == ["Nice"]
        assert [u.username for u in ecology.subscribers] == ["user2"]
        assert [u.username for u in ecology.contributors] == ["user1"]
        assert [a.message for a in ecology.alerts] == [
            "New member joined What is Ecology?"
        ]

    @pytest.mark.asyncio
    async def test_alerts_limited_to_callers_unread(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetAllSpacesUseCase)
        admin, member, _, _, ecology, _ = await seed_world(unit_env)
        await (await unit_env.get(AlertRepository)).save(
            Alert(
                id=AlertId(uuid4()),
                type=AlertType.SUBSCRIPTION,
                message="Already seen",
                user_id=member.id,
                space_id=ecology.id,
                is_read=True,
                created_at=tick(),
            )
        )

        # Act
        as_member = await use_case.execute(GetAllSpacesRequest(user_id=str(member.id)))
        as_admin = await use_case.execute(GetAllSpacesRequest(user_id=str(admin.id)))

        # Assert
        member_view = next(s for s in as_member.spaces if s.id == str(ecology.id))
        admin_view = next(s for s in as_admin.spaces if s.id == str(ecology.id))
        assert [a.message for a in member_view.alerts] == [
            "New member joined What is Ecology?"
        ]
        assert admin_view.alerts == []

    @pytest.mark.asyncio
    async def test_no_spaces(self, unit_env):
        use_case = await unit_env.get(GetAllSpacesUseCase)

        response = await use_case.execute(GetAllSpacesRequest(user_id=str(uuid4())))

        assert response.spaces == []
        assert response.total == 0


class TestGetSubscribedSpaces:
    """Tests for GetSubscribedSpacesUseCase."""

    @pytest.mark.asyncio
    async def test_only_direct_subscriptions(self, unit_env):
        use_case = await unit_env.get(GetSubscribedSpacesUseCase)
        _, member, _, _, ecology, _ = await seed_world(unit_env)

        response = await use_case.execute(
            GetSubscribedSpacesRequest(user_id=str(member.id))
        )

        assert [s.id for s in response.spaces] == [str(ecology.id)]


class TestGetSpace:
    """Tests for GetSpaceUseCase."""

    @pytest.mark.asyncio
    async def test_includes_read_alerts(self, unit_env):
        use_case = await unit_env.get(GetSpaceUseCase)
        _, member, _, _, ecology, _ = await seed_world(unit_env)
        await (await unit_env.get(AlertRepository)).save(
            Alert(
                id=AlertId(uuid4()),
                type=AlertType.SUBSCRIPTION,
                message="Already seen",
                user_id=member.id,
                space_id=ecology.id,
                is_read=True,
                created_at=tick(),
            )
        )

        detail = await use_case.execute(GetSpaceRequest(space_id=str(ecology.id)))

        assert detail.level == 2
        assert len(detail.alerts) == 2

    @pytest.mark.asyncio
    async def test_unknown_space_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetSpaceUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetSpaceRequest(space_id=str(uuid4())))


class TestSpaceTrees:
    """Tests for the navigation tree use cases."""

    @pytest.mark.asyncio
    async def test_titles_show_whole_hierarchy(self, unit_env):
        use_case = await unit_env.get(GetSpaceTitlesUseCase)
        await seed_world(unit_env)

        response = await use_case.execute()

        assert [r.name for r in response.roots] == [
            "The Science of Biology",
            "The Biosphere",
        ]
        ecology = response.roots[1].children[0]
        assert ecology.name == "What is Ecology?"
        assert [c.name for c in ecology.children] == ["Energy Flow"]

    @pytest.mark.asyncio
    async def test_subscribed_hierarchy_prunes_to_subscriptions(self, unit_env):
        use_case = await unit_env.get(GetSubscribedHierarchyUseCase)
        _, member, _, biosphere, ecology, _ = await seed_world(unit_env)

        response = await use_case.execute(
            GetSubscribedHierarchyRequest(user_id=str(member.id))
        )

        assert [r.id for r in response.roots] == [str(biosphere.id)]
        assert [c.id for c in response.roots[0].children] == [str(ecology.id)]
        assert response.roots[0].children[0].children == []

    @pytest.mark.asyncio
    async def test_subscribed_hierarchy_empty_without_subscriptions(self, unit_env):
        use_case = await unit_env.get(GetSubscribedHierarchyUseCase)
        admin, *_ = await seed_world(unit_env)

        response = await use_case.execute(
            GetSubscribedHierarchyRequest(user_id=str(admin.id))
        )

        assert response.roots == []
