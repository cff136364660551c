#!/usr/bin/env python3
"""Seed a development database with demo spaces, content and discussion.

Skips seeding when the demo users already exist.
"""

import asyncio
import sys
from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from knowspace.config import Settings
from knowspace.domain.model import (
    Alert,
    Article,
    Comment,
    Flashcard,
    Reaction,
    Space,
    SpaceContribution,
    SpaceSubscription,
    User,
)
from knowspace.domain.value import (
    AlertId,
    AlertType,
    ArticleId,
    ArticleRef,
    CommentId,
    CommentRef,
    ContributionId,
    Emoji,
    FlashcardId,
    FlashcardRef,
    ReactionId,
    SpaceId,
    SubscriptionId,
    UserId,
    Username,
)
from knowspace.persistence.database import (
    create_engine,
    create_session_factory,
    transaction,
)
from knowspace.persistence.repository import (
    PostgresAlertRepository,
    PostgresArticleRepository,
    PostgresCommentRepository,
    PostgresContributionRepository,
    PostgresFlashcardRepository,
    PostgresReactionRepository,
    PostgresSpaceRepository,
    PostgresSubscriptionRepository,
    PostgresUserRepository,
)
from knowspace.util.observability import configure_logfire


async def seed(settings: Settings) -> bool:
    """Write the demo data set in one transaction.

    Returns:
        True if data was written, False if it was already there
    """
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)

    try:
        async with transaction(session_factory) as session:
            users = PostgresUserRepository(session)
            if await users.find_by_username(Username("user1")):
                logfire.info("Demo data already present, skipping")
                return False

            spaces = PostgresSpaceRepository(session)
            articles = PostgresArticleRepository(session)
            flashcards = PostgresFlashcardRepository(session)
            comments = PostgresCommentRepository(session)
            reactions = PostgresReactionRepository(session)
            subscriptions = PostgresSubscriptionRepository(session)
            contributions = PostgresContributionRepository(session)
            alerts = PostgresAlertRepository(session)

            # Rows are spaced one second apart so listing order is stable
            clock = iter(
                datetime.now() + timedelta(seconds=i) for i in range(1000)
            )

            admin = await users.save(
                User(
                    id=UserId(uuid4()),
                    username=Username("user1"),
                    email="user1@example.org",
                    is_admin=True,
                    created_at=next(clock),
                    updated_at=datetime.now(),
                )
            )
            member = await users.save(
                User(
                    id=UserId(uuid4()),
                    username=Username("user2"),
                    email="user2@example.org",
                    created_at=next(clock),
                    updated_at=datetime.now(),
                )
            )

            biology = await spaces.save(
                Space(
                    id=SpaceId(uuid4()),
                    name="The Science of Biology",
                    about="What living things are and how we study them.",
                    created_at=next(clock),
                )
            )
            biosphere = await spaces.save(
                Space(
                    id=SpaceId(uuid4()),
                    name="The Biosphere",
                    about="Life at the scale of the whole planet.",
                    created_at=next(clock),
                )
            )
            ecology = await spaces.save(
                Space(
                    id=SpaceId(uuid4()),
                    name="What is Ecology?",
                    about="Organisms and their environment.",
                    level=2,
                    parent_id=biosphere.id,
                    created_at=next(clock),
                )
            )
            energy = await spaces.save(
                Space(
                    id=SpaceId(uuid4()),
                    name="Energy Flow",
                    about="How energy moves through an ecosystem.",
                    level=3,
                    parent_id=ecology.id,
                    created_at=next(clock),
                )
            )

            article = await articles.save(
                Article(
                    id=ArticleId(uuid4()),
                    title="Properties of Life",
                    text=(
                        "All living things share order, sensitivity to the "
                        "environment, reproduction, growth, regulation and "
                        "energy processing."
                    ),
                    author_id=admin.id,
                    space_id=biology.id,
                    created_at=next(clock),
                )
            )
            await articles.save(
                Article(
                    id=ArticleId(uuid4()),
                    title="Food Chains and Food Webs",
                    text=(
                        "Energy enters an ecosystem through producers and "
                        "passes to consumers at each trophic level."
                    ),
                    author_id=admin.id,
                    space_id=energy.id,
                    created_at=next(clock),
                )
            )
            flashcard = await flashcards.save(
                Flashcard(
                    id=FlashcardId(uuid4()),
                    title="Ecology",
                    short_description="The study of organisms and their environment.",
                    long_description=(
                        "Ecology looks at how organisms interact with one "
                        "another and with the physical world around them."
                    ),
                    author_id=member.id,
                    space_id=ecology.id,
                    created_at=next(clock),
                )
            )

            # A thread that reaches the deepest allowed level
            target = ArticleRef(id=article.id)
            parent: Comment | None = None
            for level, (author, text) in enumerate(
                [
                    (member, "Are viruses alive by this definition?"),
                    (admin, "They lack their own metabolism, so most say no."),
                    (member, "But they do evolve."),
                    (admin, "Which is why the question is still debated."),
                ],
                start=1,
            ):
                parent = await comments.save(
                    Comment(
                        id=CommentId(uuid4()),
                        text=text,
                        author_id=author.id,
                        level=level,
                        parent_id=parent.id if parent else None,
                        target=target,
                        created_at=next(clock),
                    )
                )
            await comments.save(
                Comment(
                    id=CommentId(uuid4()),
                    text="Good card for revision.",
                    author_id=admin.id,
                    target=FlashcardRef(id=flashcard.id),
                    created_at=next(clock),
                )
            )

            await reactions.save(
                Reaction(
                    id=ReactionId(uuid4()),
                    emoji=Emoji.FIRE,
                    user_id=member.id,
                    target=target,
                    created_at=next(clock),
                )
            )
            if parent:
                await reactions.save(
                    Reaction(
                        id=ReactionId(uuid4()),
                        emoji=Emoji.ROCK,
                        user_id=member.id,
                        target=CommentRef(id=parent.id),
                        created_at=next(clock),
                    )
                )

            for space in (biology, ecology):
                await subscriptions.save(
                    SpaceSubscription(
                        id=SubscriptionId(uuid4()),
                        user_id=member.id,
                        space_id=space.id,
                        created_at=next(clock),
                    )
                )
                await alerts.save(
                    Alert(
                        id=AlertId(uuid4()),
                        type=AlertType.SUBSCRIPTION,
                        message=f"New member joined {space.name}",
                        user_id=member.id,
                        space_id=space.id,
                        created_at=next(clock),
                    )
                )
            for space in (biology, biosphere, ecology, energy):
                await contributions.save(
                    SpaceContribution(
                        id=ContributionId(uuid4()),
                        user_id=admin.id,
                        space_id=space.id,
                        created_at=next(clock),
                    )
                )

            logfire.info(
                "Demo data seeded", admin_id=str(admin.id), member_id=str(member.id)
            )
            return True
    finally:
        await engine.dispose()


def main() -> int:
    """Seed the database configured by DATABASE__URL."""
    settings = Settings()
    configure_logfire(settings)

    if settings.environment == "production":
        logfire.error("Refusing to seed demo data in production")
        return 1

    asyncio.run(seed(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
