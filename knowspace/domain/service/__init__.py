"""Domain services."""

from .alert_service import AlertService
from .base import Service
from .comment_service import CommentService
from .content_service import ContentService
from .jwt_service import JWTService
from .reaction_service import ReactionService, ReactionView
from .space_service import SpaceService, filter_subscribed
from .subscription_service import SubscriptionService
from .thread_service import CommentNode, ThreadService
from .user_service import UserService, UserSummaryCache

__all__ = [
    "AlertService",
    "CommentNode",
    "CommentService",
    "ContentService",
    "JWTService",
    "ReactionService",
    "ReactionView",
    "Service",
    "SpaceService",
    "SubscriptionService",
    "ThreadService",
    "UserService",
    "UserSummaryCache",
    "filter_subscribed",
]
