"""Unit tests for GetThreadUseCase."""

from uuid import uuid4

import pytest

from knowspace.application.usecase.comment import GetThreadRequest, GetThreadUseCase
from knowspace.domain.error import InvalidInputError, NotFoundError
from knowspace.domain.repository import (
    ArticleRepository,
    CommentRepository,
    SpaceRepository,
    UserRepository,
)
from knowspace.domain.value import ArticleRef
from tests.conftest import make_article, make_comment, make_space, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetThreadUseCase:
    """Tests for GetThreadUseCase."""

    @pytest.mark.asyncio
    async def test_counts_every_node(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        author = await (await unit_env.get(UserRepository)).save(make_user())
        space = await (await unit_env.get(SpaceRepository)).save(make_space("Space"))
        article = await (await unit_env.get(ArticleRepository)).save(
            make_article(author, space)
        )
        comments = await unit_env.get(CommentRepository)
        target = ArticleRef(id=article.id)
        root = await comments.save(make_comment(author, target, "root"))
        await comments.save(make_comment(author, target, "reply", parent=root))
        await comments.save(make_comment(author, target, "second root"))

        # Act
        response = await use_case.execute(
            GetThreadRequest(content_kind="article", content_id=str(article.id))
        )

        # Assert
        assert response.total == 3
        assert [c.text for c in response.comments] == ["root", "second root"]
        assert [c.text for c in response.comments[0].replies] == ["reply"]

    @pytest.mark.asyncio
    async def test_missing_flashcard_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        with pytest.raises(NotFoundError, match="Flashcard"):
            await use_case.execute(
                GetThreadRequest(content_kind="flashcard", content_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_malformed_id_rejected(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        with pytest.raises(InvalidInputError, match="article_id"):
            await use_case.execute(
                GetThreadRequest(content_kind="article", content_id="abc")
            )
