"""End-to-end tests for comment, thread and reaction endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from knowspace.interface.api.app import create_app
from knowspace.persistence.repository.inmemory import InMemoryStore
from tests.conftest import bearer, make_article, make_flashcard, make_space, make_user
from tests.di import build_test_container


@pytest.fixture
def world():
    store = InMemoryStore()
    author = make_user("user1")
    reader = make_user("user2")
    for user in (author, reader):
        store.users[user.id] = user

    space = make_space("What is Ecology?")
    store.spaces[space.id] = space
    article = make_article(author, space, "Ecosystems")
    store.articles[article.id] = article
    card = make_flashcard(author, space, "Biome")
    store.flashcards[card.id] = card

    return {
        "store": store,
        "author": author,
        "reader": reader,
        "article": article,
        "card": card,
    }


@pytest.fixture
def client(world):
    """Create test client with test container."""
    app_instance = create_app(build_test_container(store=world["store"]))
    return TestClient(app_instance)


def post_comment(client, user, **body):
    return client.post("/content/comments", json=body, headers=bearer(user))


class TestCreateComment:
    """Tests for POST /content/comments."""

    def test_comment_on_article(self, client, world):
        response = post_comment(
            client,
            world["reader"],
            text="Great read",
            content_type="article",
            article_id=str(world["article"].id),
        )

        assert response.status_code == 201
        comment = response.json()["comment"]
        assert comment["level"] == 1
        assert comment["parent_id"] is None
        assert comment["target_kind"] == "article"
        assert comment["author"]["username"] == "user2"
        assert comment["replies"] == []

    def test_reply_chain_stops_at_level_four(self, client, world):
        # Arrange: a chain of four comments
        parent = post_comment(
            client,
            world["author"],
            text="Level 1",
            content_type="flashcard",
            flashcard_id=str(world["card"].id),
        ).json()["comment"]
        for level in (2, 3, 4):
            parent = post_comment(
                client, world["reader"], text=f"Level {level}", parent_id=parent["id"]
            ).json()["comment"]
            assert parent["level"] == level
            assert parent["target_id"] == str(world["card"].id)

        # Act
        response = post_comment(
            client, world["author"], text="Level 5", parent_id=parent["id"]
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {"detail": "Cannot reply to comments beyond level 4"}

    def test_both_targets_returns_400(self, client, world):
        response = post_comment(
            client,
            world["reader"],
            text="Confused",
            article_id=str(world["article"].id),
            flashcard_id=str(world["card"].id),
        )

        assert response.status_code == 400

    def test_unknown_parent_returns_404(self, client, world):
        response = post_comment(
            client, world["reader"], text="Reply", parent_id=str(uuid4())
        )

        assert response.status_code == 404

    def test_missing_text_returns_400(self, client, world):
        response = post_comment(
            client, world["reader"], article_id=str(world["article"].id)
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request"

    def test_requires_credentials(self, client, world):
        response = client.post(
            "/content/comments",
            json={"text": "Anon", "article_id": str(world["article"].id)},
        )

        assert response.status_code == 401


class TestGetThread:
    """Tests for GET /content/{kind}/{id}/comments."""

    def test_article_thread_nests_replies(self, client, world):
        root = post_comment(
            client,
            world["author"],
            text="Root",
            article_id=str(world["article"].id),
        ).json()["comment"]
        post_comment(client, world["reader"], text="Reply", parent_id=root["id"])

        response = client.get(
            f"/content/articles/{world['article'].id}/comments",
            headers=bearer(world["reader"]),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert data["content_kind"] == "article"
        assert [c["text"] for c in data["comments"]] == ["Root"]
        assert [c["text"] for c in data["comments"][0]["replies"]] == ["Reply"]

    def test_empty_flashcard_thread(self, client, world):
        response = client.get(
            f"/content/flashcards/{world['card'].id}/comments",
            headers=bearer(world["reader"]),
        )

        assert response.status_code == 200
        assert response.json()["comments"] == []
        assert response.json()["total"] == 0

    def test_unknown_article_returns_404(self, client, world):
        response = client.get(
            f"/content/articles/{uuid4()}/comments", headers=bearer(world["reader"])
        )

        assert response.status_code == 404


class TestCreateReaction:
    """Tests for POST /content/reactions."""

    def test_react_once(self, client, world):
        headers = bearer(world["reader"])
        body = {"emoji": "🔥", "article_id": str(world["article"].id)}

        first = client.post("/content/reactions", json=body, headers=headers)
        second = client.post(
            "/content/reactions", json={**body, "emoji": "🎉"}, headers=headers
        )

        assert first.status_code == 201
        assert first.json()["reaction"]["emoji"] == "🔥"
        assert first.json()["reaction"]["user"]["username"] == "user2"
        assert second.status_code == 409
        assert second.json() == {"detail": "User has already reacted to this content"}

    def test_react_to_comment_shows_in_thread(self, client, world):
        root = post_comment(
            client, world["author"], text="Root", article_id=str(world["article"].id)
        ).json()["comment"]

        response = client.post(
            "/content/reactions",
            json={"emoji": "🤘", "comment_id": root["id"]},
            headers=bearer(world["reader"]),
        )
        thread = client.get(
            f"/content/articles/{world['article'].id}/comments",
            headers=bearer(world["reader"]),
        ).json()

        assert response.status_code == 201
        reactions = thread["comments"][0]["reactions"]
        assert [r["emoji"] for r in reactions] == ["🤘"]
        assert reactions[0]["target_kind"] == "comment"

    def test_invalid_emoji_returns_400(self, client, world):
        response = client.post(
            "/content/reactions",
            json={"emoji": "👍", "article_id": str(world["article"].id)},
            headers=bearer(world["reader"]),
        )

        assert response.status_code == 400
        assert "Allowed emojis" in response.json()["detail"]
        assert world["store"].reactions == []

    def test_no_target_returns_400(self, client, world):
        response = client.post(
            "/content/reactions",
            json={"emoji": "🔥"},
            headers=bearer(world["reader"]),
        )

        assert response.status_code == 400

    def test_unknown_flashcard_returns_404(self, client, world):
        response = client.post(
            "/content/reactions",
            json={"emoji": "🔥", "flashcard_id": str(uuid4())},
            headers=bearer(world["reader"]),
        )

        assert response.status_code == 404
