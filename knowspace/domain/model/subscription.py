"""Space membership entities."""

from knowspace.domain.model.common import Entity
from knowspace.domain.value import ContributionId, SpaceId, SubscriptionId, UserId


class SpaceSubscription(Entity):
    """A user following a space. Unique per (user, space)."""

    id: SubscriptionId
    user_id: UserId
    space_id: SpaceId


class SpaceContribution(Entity):
    """A user credited as a contributor of a space. Unique per (user, space)."""

    id: ContributionId
    user_id: UserId
    space_id: SpaceId
