from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..normalization.cities import normalize_city
from ..restaurants.models import RestaurantGroup


class FilterDimension(str, Enum):
    name = "name"
    city = "city"
    neighborhood = "neighborhood"
    cuisine_type = "cuisineType"
    reservation_needed = "reservationNeeded"
    price_range = "priceRange"


MULTI_VALUE_DIMENSIONS = frozenset({
    FilterDimension.city,
    FilterDimension.neighborhood,
    FilterDimension.cuisine_type,
    FilterDimension.price_range,
})

# FilterDimension value -> FilterState attribute
STATE_FIELDS: dict[FilterDimension, str] = {
    FilterDimension.name: "name",
    FilterDimension.city: "city",
    FilterDimension.neighborhood: "neighborhood",
    FilterDimension.cuisine_type: "cuisine_type",
    FilterDimension.reservation_needed: "reservation_needed",
    FilterDimension.price_range: "price_range",
}


class FilterState(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    city: list[str] = Field(default_factory=list)
    neighborhood: list[str] = Field(default_factory=list)
    cuisine_type: list[str] = Field(default_factory=list, alias="cuisineType")
    reservation_needed: str = Field(default="", alias="reservationNeeded")
    price_range: list[str] = Field(default_factory=list, alias="priceRange")

    @field_validator("city")
    @classmethod
    def _canonical_cities(cls, value: list[str]) -> list[str]:
        cities: list[str] = []
        for city in value:
            canonical = normalize_city(city)
            if canonical and canonical not in cities:
                cities.append(canonical)
        return cities


class FilterAction(BaseModel):
    type: Literal["set", "reset"] = "set"
    dimension: FilterDimension | None = None
    value: Any = None


class FacetOptions(BaseModel):
    names: list[str] = Field(default_factory=list)
    cities: list[str] = Field(default_factory=list)
    neighborhoods: list[str] = Field(default_factory=list)
    cuisine_types: list[str] = Field(default_factory=list)
    price_ranges: list[str] = Field(default_factory=list)
    reservation_options: list[str] = Field(default_factory=list)


class ReduceRequest(BaseModel):
    state: FilterState = Field(default_factory=FilterState)
    action: FilterAction


class FilterResult(BaseModel):
    groups: list[RestaurantGroup]
    filtered_count: int
    total_count: int
    has_active_filters: bool
