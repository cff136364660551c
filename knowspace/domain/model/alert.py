"""Alert entity."""

from pydantic import Field

from knowspace.domain.model.common import Entity
from knowspace.domain.value import AlertId, AlertType, SpaceId, UserId


class Alert(Entity):
    """Notice raised for a user about activity in a space."""

    id: AlertId
    type: AlertType
    message: str = Field(min_length=1, max_length=500)
    user_id: UserId
    space_id: SpaceId
    is_read: bool = False
