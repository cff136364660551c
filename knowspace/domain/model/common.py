"""Base models for domain entities."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable; changes produce new instances.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class Entity(DomainModel):
    """Stored domain model.

    Listings of every entity are ordered by ``created_at``, oldest first.
    """

    created_at: datetime = Field(default_factory=datetime.now)
