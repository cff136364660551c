"""Enumerations, limits and simple value types of the domain."""

import re
from enum import Enum

from pydantic import ConfigDict, RootModel, field_validator

# Replies are accepted down to this level; a level-4 comment takes no replies.
MAX_COMMENT_LEVEL = 4

# Spaces nest at most this deep (level 1 is a top-level space).
MAX_SPACE_LEVEL = 3


class Emoji(str, Enum):
    """The fixed set of reactions a user can leave."""

    FIRE = "🔥"
    PARTY = "🎉"
    ROCK = "🤘"


ALLOWED_EMOJIS = tuple(emoji.value for emoji in Emoji)


class ContentKind(str, Enum):
    """Kind of content a top-level comment is written against.

    Alert discussions live on the article the alert refers to, so
    ``ALERT`` resolves to an article reference.
    """

    ARTICLE = "article"
    FLASHCARD = "flashcard"
    ALERT = "alert"


class AlertType(str, Enum):
    """Type of alert raised for a space."""

    SUBSCRIPTION = "subscription"


class Username(RootModel[str]):
    """Public display name of a user.

    1-50 characters, no surrounding whitespace.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.fullmatch(r"\S(.{0,48}\S)?", v):
            raise ValueError(
                "Username must be 1-50 characters without leading/trailing spaces"
            )
        return v

    def __str__(self) -> str:
        return self.root
