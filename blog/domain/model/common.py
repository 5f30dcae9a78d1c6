"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable; state changes go through ``model_copy``
    and are persisted by the owning service.
    """

    model_config = ConfigDict(frozen=True)
