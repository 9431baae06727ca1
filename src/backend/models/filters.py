"""
Filter options for the property listing query.

Every field is optional; an absent field places no constraint on the
listing. Unknown keys are ignored so a raw query-string mapping can be
validated directly.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PropertyFilterOptions(BaseModel):
    """Optional criteria narrowing the property listing."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    city: str | None = Field(default=None, description="Substring of the city name")
    owner_id: int | None = Field(default=None, description="Exact owner user ID")
    minimum_price_per_night: Decimal | None = Field(
        default=None, description="Lower bound on nightly cost, in dollars"
    )
    maximum_price_per_night: Decimal | None = Field(
        default=None, description="Upper bound on nightly cost, in dollars"
    )
    minimum_rating: float | None = Field(
        default=None,
        allow_inf_nan=False,
        description="Lower bound on the average review rating",
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        # HTML forms submit untouched inputs as empty strings
        if isinstance(value, str) and not value.strip():
            return None
        return value
