"""Unit tests for space entities and tree assembly."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from knowspace.domain.model import Comment, Space, assemble_space_tree
from knowspace.domain.value import ArticleRef, CommentId, SpaceId, UserId
from tests.conftest import make_space


class TestSpaceLevels:
    """Spaces nest at most three levels deep."""

    def test_root_space_cannot_have_parent(self):
        with pytest.raises(ValidationError):
            Space(id=SpaceId(uuid4()), name="Root", level=1, parent_id=SpaceId(uuid4()))

    def test_nested_space_needs_parent(self):
        with pytest.raises(ValidationError):
            Space(id=SpaceId(uuid4()), name="Orphan", level=2)

    def test_level_four_rejected(self):
        with pytest.raises(ValidationError):
            Space(
                id=SpaceId(uuid4()), name="Too deep", level=4, parent_id=SpaceId(uuid4())
            )

    def test_parent_one_level_above_accepted(self):
        root = make_space("Root")
        child = make_space("Child", level=2, parent=root)

        child.check_parent(root)

    def test_parent_at_wrong_level_rejected(self):
        root = make_space("Root")
        child = make_space("Child", level=2, parent=root)
        skipped = make_space("Skipped", level=3, parent=root)

        with pytest.raises(ValueError, match="need a level 2 parent, got level 1"):
            skipped.check_parent(root)
        with pytest.raises(ValueError, match="need a level 1 parent"):
            make_space("Sibling", level=2, parent=child).check_parent(child)

    def test_missing_parent_rejected(self):
        child = make_space("Child", level=2, parent=make_space("Unsaved"))

        with pytest.raises(ValueError, match="does not exist"):
            child.check_parent(None)


class TestCommentLevels:
    """Comment levels run from 1 to 4."""

    def test_reply_at_level_one_rejected(self):
        with pytest.raises(ValidationError):
            Comment(
                id=CommentId(uuid4()),
                text="Reply",
                author_id=UserId(uuid4()),
                level=1,
                parent_id=CommentId(uuid4()),
                target=ArticleRef(id=uuid4()),
            )

    def test_level_five_rejected(self):
        with pytest.raises(ValidationError):
            Comment(
                id=CommentId(uuid4()),
                text="Too deep",
                author_id=UserId(uuid4()),
                level=5,
                parent_id=CommentId(uuid4()),
                target=ArticleRef(id=uuid4()),
            )

    def test_level_four_accepts_no_replies(self):
        comment = Comment(
            id=CommentId(uuid4()),
            text="Deepest",
            author_id=UserId(uuid4()),
            level=4,
            parent_id=CommentId(uuid4()),
            target=ArticleRef(id=uuid4()),
        )

        assert comment.accepts_replies is False


class TestAssembleSpaceTree:
    """Tests for building the navigation forest."""

    def test_empty_input_gives_empty_forest(self):
        assert assemble_space_tree([]) == []

    def test_children_nest_under_parents_in_input_order(self):
        biology = make_space("The Science of Biology")
        biosphere = make_space("The Biosphere")
        ecology = make_space("What is Ecology?", level=2, parent=biosphere)
        energy = make_space("Energy Flow", level=3, parent=ecology)
        climate = make_space("Climate", level=2, parent=biosphere)

        tree = assemble_space_tree([biology, biosphere, ecology, energy, climate])

        assert [n.name for n in tree] == ["The Science of Biology", "The Biosphere"]
        assert tree[0].children == []
        assert [n.name for n in tree[1].children] == ["What is Ecology?", "Climate"]
        assert [n.name for n in tree[1].children[0].children] == ["Energy Flow"]

    def test_root_level_selects_top_of_forest(self):
        root = make_space("Root")
        middle = make_space("Middle", level=2, parent=root)
        leaf = make_space("Leaf", level=3, parent=middle)

        tree = assemble_space_tree([root, middle, leaf], root_level=2)

        assert [n.id for n in tree] == [middle.id]
        assert [n.id for n in tree[0].children] == [leaf.id]
