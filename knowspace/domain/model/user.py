"""User aggregate root.

Users author content, subscribe to spaces and react to things.
Credentials are owned by the authentication collaborator and never
travel with the domain model.
"""

from datetime import datetime

from pydantic import Field

from knowspace.domain.model.common import DomainModel, Entity
from knowspace.domain.value import UserId
from knowspace.domain.value.types import Username


class User(Entity):
    """User aggregate root."""

    id: UserId
    username: Username
    email: str
    is_admin: bool = False
    updated_at: datetime = Field(default_factory=datetime.now)

    def summary(self) -> "UserSummary":
        """Public identity shown next to content."""
        return UserSummary(id=self.id, username=self.username)


class UserSummary(DomainModel):
    """Public identity of a user (id and display name only)."""

    id: UserId
    username: Username
