from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from ..normalization.cities import has_multiple_locations
from ..normalization.tokens import sort_cuisine_type


class RestaurantRecord(BaseModel):
    """One recommendation submission, as it arrives from a spreadsheet or upload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | int | None = None
    name: str = ""
    website: str = ""
    address: str = ""
    city: str = ""
    neighborhood: str = ""
    cuisine_type: str = Field(default="", alias="cuisineType")
    price_range: str = Field(default="", alias="priceRange")
    reservation_needed: str = Field(default="", alias="reservationNeeded")
    planning_timeframe: str = Field(default="", alias="planningTimeframe")
    what_you_love: str = Field(default="", alias="whatYouLove")
    must_have: str = Field(default="", alias="mustHave")
    multiple_locations: bool = Field(default=False, alias="hasMultipleLocations")

    @field_validator(
        "name",
        "website",
        "address",
        "city",
        "neighborhood",
        "cuisine_type",
        "price_range",
        "reservation_needed",
        "planning_timeframe",
        "what_you_love",
        "must_have",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, float) and math.isnan(value):
            return ""
        if not isinstance(value, str):
            return str(value)
        return value

    @model_validator(mode="after")
    def _flag_multiple_locations(self) -> RestaurantRecord:
        if has_multiple_locations(self.city):
            self.multiple_locations = True
        return self

    @computed_field(alias="sortedCuisineType")
    @property
    def sorted_cuisine_type(self) -> str:
        return sort_cuisine_type(self.cuisine_type)


class RestaurantGroup(BaseModel):
    id: str
    name: str
    recommendations: list[RestaurantRecord] = Field(default_factory=list)


class RestaurantsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "success"
    restaurants: list[RestaurantRecord]
    updated_at: str | None = Field(default=None, alias="updatedAt")
    count: int
    source: str


class UploadRequest(BaseModel):
    restaurants: list[RestaurantRecord]


class UploadResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str
    message: str
    count: int
    updated_at: str = Field(alias="updatedAt")


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
