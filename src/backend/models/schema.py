"""
Record models for rows written to the LightBnB schema.

These models describe the payloads accepted by the insert operations.
Rows read back from the database are returned as plain dicts.
"""

from pydantic import BaseModel, Field


class NewUser(BaseModel):
    """A user account to insert into ``users``."""

    name: str = Field(description="Display name")
    email: str = Field(description="Login email; stored lower-cased")
    password: str = Field(description="Password hash produced by the caller")


class NewProperty(BaseModel):
    """
    A property listing to insert into ``properties``.

    Field order matches the column order of the INSERT statement.
    """

    owner_id: int = Field(description="ID of the owning user")
    title: str = Field(description="Listing title")
    description: str = Field(default="", description="Listing description")
    thumbnail_photo_url: str = Field(default="", description="Small photo URL")
    cover_photo_url: str = Field(default="", description="Large photo URL")
    cost_per_night: int = Field(ge=0, description="Nightly cost in cents")
    parking_spaces: int = Field(default=0, ge=0)
    number_of_bathrooms: int = Field(default=0, ge=0)
    number_of_bedrooms: int = Field(default=0, ge=0)
    country: str = Field(description="Country name")
    street: str = Field(description="Street address")
    city: str = Field(description="City name")
    province: str = Field(description="Province or state")
    post_code: str = Field(description="Postal code")
