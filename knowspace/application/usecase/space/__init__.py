"""Space use cases."""

from .detail import ArticleItem, FlashcardItem, SpaceDetail, SpaceDetailBuilder
from .get_all_spaces import GetAllSpacesRequest, GetAllSpacesUseCase, SpaceListResponse
from .get_space import GetSpaceRequest, GetSpaceUseCase
from .get_space_titles import (
    GetSpaceTitlesUseCase,
    GetSubscribedHierarchyRequest,
    GetSubscribedHierarchyUseCase,
    SpaceNodeItem,
    SpaceTreeResponse,
)
from .get_subscribed_spaces import (
    GetSubscribedSpacesRequest,
    GetSubscribedSpacesUseCase,
)
from .toggle_subscription import (
    ToggleSubscriptionRequest,
    ToggleSubscriptionResponse,
    ToggleSubscriptionUseCase,
)

__all__ = [
    "ArticleItem",
    "FlashcardItem",
    "GetAllSpacesRequest",
    "GetAllSpacesUseCase",
    "GetSpaceRequest",
    "GetSpaceUseCase",
    "GetSpaceTitlesUseCase",
    "GetSubscribedHierarchyRequest",
    "GetSubscribedHierarchyUseCase",
    "GetSubscribedSpacesRequest",
    "GetSubscribedSpacesUseCase",
    "SpaceDetail",
    "SpaceDetailBuilder",
    "SpaceListResponse",
    "SpaceNodeItem",
    "SpaceTreeResponse",
    "ToggleSubscriptionRequest",
    "ToggleSubscriptionResponse",
    "ToggleSubscriptionUseCase",
]
