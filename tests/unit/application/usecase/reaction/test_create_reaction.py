"""Unit tests for CreateReactionUseCase."""

from uuid import uuid4

import pytest

from knowspace.application.usecase.reaction import (
    CreateReactionRequest,
    CreateReactionUseCase,
)
from knowspace.domain.error import InvalidInputError, NotFoundError
from knowspace.domain.repository import (
    FlashcardRepository,
    ReactionRepository,
    SpaceRepository,
    UserRepository,
)
from knowspace.domain.value import ArticleRef
from tests.conftest import make_flashcard, make_space, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateReactionUseCase:
    """Tests for CreateReactionUseCase."""

    @pytest.mark.asyncio
    async def test_reaction_on_flashcard(self, unit_env):
        use_case = await unit_env.get(CreateReactionUseCase)
        user = await (await unit_env.get(UserRepository)).save(make_user("fan"))
        space = await (await unit_env.get(SpaceRepository)).save(make_space("Space"))
        card = await (await unit_env.get(FlashcardRepository)).save(
            make_flashcard(user, space)
        )

        response = await use_case.execute(
            CreateReactionRequest(
                user_id=str(user.id), emoji="🎉", flashcard_id=str(card.id)
            )
        )

        assert response.reaction.emoji == "🎉"
        assert response.reaction.target_kind == "flashcard"
        assert response.reaction.target_id == str(card.id)
        assert response.reaction.user.username == "fan"

    @pytest.mark.asyncio
    async def test_bad_emoji_checked_before_target(self, unit_env):
        use_case = await unit_env.get(CreateReactionUseCase)

        # No target at all: the emoji error still wins
        with pytest.raises(InvalidInputError, match="Invalid emoji"):
            await use_case.execute(
                CreateReactionRequest(user_id=str(uuid4()), emoji="👍")
            )

    @pytest.mark.asyncio
    async def test_two_targets_rejected_without_writing(self, unit_env):
        use_case = await unit_env.get(CreateReactionUseCase)
        reactions = await unit_env.get(ReactionRepository)
        article_id = uuid4()

        with pytest.raises(InvalidInputError, match="exactly one"):
            await use_case.execute(
                CreateReactionRequest(
                    user_id=str(uuid4()),
                    emoji="🔥",
                    article_id=str(article_id),
                    comment_id=str(uuid4()),
                )
            )

        assert await reactions.find_by_target(ArticleRef(id=article_id)) == []

    @pytest.mark.asyncio
    async def test_missing_alert_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateReactionUseCase)

        with pytest.raises(NotFoundError, match="Alert"):
            await use_case.execute(
                CreateReactionRequest(
                    user_id=str(uuid4()), emoji="🤘", alert_id=str(uuid4())
                )
            )
