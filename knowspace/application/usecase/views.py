"""Response items shared by several use cases.

Each item mirrors a domain shape and knows how to build itself from it.
"""

from datetime import datetime

from pydantic import BaseModel

from knowspace.domain.model import Alert, UserSummary
from knowspace.domain.service import CommentNode, ReactionView


class UserSummaryItem(BaseModel):
    """Public identity of a user."""

    id: str
    username: str

    @classmethod
    def from_domain(cls, summary: UserSummary) -> "UserSummaryItem":
        return cls(id=str(summary.id), username=summary.username.root)


class ReactionItem(BaseModel):
    """A reaction and who left it."""

    id: str
    emoji: str
    target_kind: str
    target_id: str
    user: UserSummaryItem
    created_at: datetime

    @classmethod
    def from_domain(cls, view: ReactionView) -> "ReactionItem":
        reaction = view.reaction
        return cls(
            id=str(reaction.id),
            emoji=reaction.emoji.value,
            target_kind=reaction.target.kind,
            target_id=str(reaction.target.id),
            user=UserSummaryItem.from_domain(view.user),
            created_at=reaction.created_at,
        )


class CommentItem(BaseModel):
    """Comment in an assembled thread.

    Recursive structure mirroring the domain comment node.
    """

    id: str
    text: str
    level: int
    parent_id: str | None
    target_kind: str
    target_id: str
    author: UserSummaryItem
    created_at: datetime
    reactions: list[ReactionItem]
    replies: list["CommentItem"]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentItem":
        """Convert a domain comment node, replies included."""
        comment = node.comment
        return cls(
            id=str(comment.id),
            text=comment.text,
            level=comment.level,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            target_kind=comment.target.kind,
            target_id=str(comment.target.id),
            author=UserSummaryItem.from_domain(node.author),
            created_at=comment.created_at,
            reactions=[ReactionItem.from_domain(r) for r in node.reactions],
            replies=[cls.from_domain(reply) for reply in node.replies],
        )


class AlertItem(BaseModel):
    """Alert raised in a space."""

    id: str
    type: str
    message: str
    is_read: bool
    created_at: datetime
    user: UserSummaryItem

    @classmethod
    def from_domain(cls, alert: Alert, user: UserSummary) -> "AlertItem":
        return cls(
            id=str(alert.id),
            type=alert.type.value,
            message=alert.message,
            is_read=alert.is_read,
            created_at=alert.created_at,
            user=UserSummaryItem.from_domain(user),
        )
