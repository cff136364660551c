"""Domain model entities for Knowspace."""

from knowspace.domain.model.alert import Alert
from knowspace.domain.model.comment import Comment
from knowspace.domain.model.content import Article, Flashcard
from knowspace.domain.model.reaction import Reaction
from knowspace.domain.model.space import Space, SpaceNode, assemble_space_tree
from knowspace.domain.model.subscription import SpaceContribution, SpaceSubscription
from knowspace.domain.model.user import User, UserSummary

__all__ = [
    "Alert",
    "Article",
    "Comment",
    "Flashcard",
    "Reaction",
    "Space",
    "SpaceContribution",
    "SpaceNode",
    "SpaceSubscription",
    "User",
    "UserSummary",
    "assemble_space_tree",
]
