"""Unit tests for row and target mappers."""

from datetime import datetime
from uuid import uuid4

import pytest

from knowspace.domain.model import Reaction
from knowspace.domain.value import (
    AlertRef,
    ArticleRef,
    CommentRef,
    Emoji,
    FlashcardRef,
    ReactionId,
    UserId,
)
from knowspace.persistence.mappers import (
    comment_to_dict,
    reaction_to_dict,
    row_to_comment,
    row_to_reaction,
    row_to_target,
)
from tests.conftest import make_comment, make_user


class TestTargetColumns:
    """Targets spread over one nullable column per kind."""

    def test_comment_sets_only_its_target_column(self):
        article_id = uuid4()
        comment = make_comment(make_user(), ArticleRef(id=article_id))

        data = comment_to_dict(comment)

        assert data["article_id"] == article_id
        assert data["flashcard_id"] is None
        assert "target" not in data
        assert "comment_id" not in data

    def test_comment_row_restores_flashcard_target(self):
        flashcard_id = uuid4()
        comment = make_comment(make_user(), FlashcardRef(id=flashcard_id))

        restored = row_to_comment(comment_to_dict(comment))

        assert restored == comment

    @pytest.mark.parametrize("ref_type", [ArticleRef, FlashcardRef, CommentRef, AlertRef])
    def test_reaction_row_restores_each_kind(self, ref_type):
        reaction = Reaction(
            id=ReactionId(uuid4()),
            emoji=Emoji.ROCK,
            user_id=UserId(uuid4()),
            target=ref_type(id=uuid4()),
            created_at=datetime(2026, 1, 1),
        )

        data = reaction_to_dict(reaction)

        assert data["emoji"] == "🤘"
        set_columns = [
            k for k in ("article_id", "flashcard_id", "comment_id", "alert_id") if data[k]
        ]
        assert set_columns == [f"{reaction.target.kind}_id"]
        assert row_to_reaction(data) == reaction

    def test_string_ids_from_rows_are_parsed(self):
        alert_id = uuid4()

        assert row_to_target({"alert_id": str(alert_id)}) == AlertRef(id=alert_id)

    def test_row_without_target_rejected(self):
        with pytest.raises(ValueError, match="no target"):
            row_to_target({"id": uuid4()})
