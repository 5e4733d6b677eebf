"""Base models for feed entities."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; derived values are attached with model_copy.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # NewType identifiers, CodeSnippet
    )


class PoweredUpModel(DomainModel):
    """An entity users can power up (posts and comments).

    power_up_count is derived from the power-up rows and never persisted.
    """

    power_up_count: int = Field(default=0, ge=0)

    def with_power_up_count(self, count: int) -> Self:
        return self.model_copy(update={"power_up_count": count})
