"""Reaction entity.

A reaction is one of a fixed set of emojis left by a user on an
article, flashcard, comment or alert. Reactions are permanent: one per
user per target, never updated or removed.
"""

from knowspace.domain.model.common import Entity
from knowspace.domain.value import Emoji, ReactionId, ReactionTarget, UserId


class Reaction(Entity):
    """Reaction entity.

    Business rules:
    - One reaction per user per target (enforced by database unique constraints)
    - Emoji limited to the fixed set
    """

    id: ReactionId
    emoji: Emoji
    user_id: UserId
    target: ReactionTarget
