from __future__ import annotations

from typing import Callable

from ..normalization.cities import normalize_city
from ..normalization.dedupe import deduplicate_similar
from ..normalization.tokens import split_tokens
from ..restaurants.grouper import flatten_groups
from ..restaurants.models import RestaurantGroup, RestaurantRecord
from .matching import matches_city, matches_cuisine, matches_neighborhood
from .models import FacetOptions, FilterState

# The four canonical answers from the recommendation spreadsheet
RESERVATION_OPTIONS: tuple[str, ...] = (
    "Walk-in only/no reservations",
    "Just pull up!",
    "Not required, but recommended",
    "Yes, required",
)

_Predicate = Callable[[RestaurantRecord, list[str]], bool]


def _in_cities(records: list[RestaurantRecord], cities: list[str]) -> list[RestaurantRecord]:
    return [r for r in records if matches_city(r, cities)]


def _constrain(
    records: list[RestaurantRecord],
    selected: list[str],
    predicate: _Predicate,
) -> list[RestaurantRecord]:
    """Narrow ``records`` by a cross-dimension selection.

    A selection that matches nothing in ``records`` does not constrain, so a
    stale pick in one dimension never empties the options of another.
    """
    if not selected:
        return records
    narrowed = [r for r in records if predicate(r, selected)]
    return narrowed or records


def _collect_tokens(records: list[RestaurantRecord], attr: str) -> list[str]:
    return [token for r in records for token in split_tokens(getattr(r, attr))]


def _dollar_count(price: str) -> int:
    return price.count("$")


def city_options(groups: list[RestaurantGroup]) -> list[str]:
    cities = {normalize_city(r.city) for r in flatten_groups(groups)}
    cities.discard("")
    return sorted(cities)


def neighborhood_options(groups: list[RestaurantGroup], state: FilterState) -> list[str]:
    records = _in_cities(flatten_groups(groups), state.city)
    records = _constrain(records, state.cuisine_type, matches_cuisine)
    return deduplicate_similar(_collect_tokens(records, "neighborhood"))


def cuisine_options(groups: list[RestaurantGroup], state: FilterState) -> list[str]:
    records = _in_cities(flatten_groups(groups), state.city)
    records = _constrain(records, state.neighborhood, matches_neighborhood)
    return deduplicate_similar(_collect_tokens(records, "cuisine_type"))


def price_range_options(groups: list[RestaurantGroup], state: FilterState) -> list[str]:
    records = _in_cities(flatten_groups(groups), state.city)
    records = _constrain(records, state.cuisine_type, matches_cuisine)
    records = _constrain(records, state.neighborhood, matches_neighborhood)
    prices = sorted({r.price_range for r in records if r.price_range})
    return sorted(prices, key=_dollar_count)


def reservation_options(groups: list[RestaurantGroup], state: FilterState) -> list[str]:
    if not state.city:
        return list(RESERVATION_OPTIONS)
    present = {r.reservation_needed for r in _in_cities(flatten_groups(groups), state.city)}
    return [option for option in RESERVATION_OPTIONS if option in present]


def name_options(groups: list[RestaurantGroup], state: FilterState) -> list[str]:
    if state.city:
        groups = [
            g for g in groups
            if any(matches_city(r, state.city) for r in g.recommendations)
        ]
    return sorted(g.name for g in groups)


def extract_facets(groups: list[RestaurantGroup], state: FilterState) -> FacetOptions:
    return FacetOptions(
        names=name_options(groups, state),
        cities=city_options(groups),
        neighborhoods=neighborhood_options(groups, state),
        cuisine_types=cuisine_options(groups, state),
        price_ranges=price_range_options(groups, state),
        reservation_options=reservation_options(groups, state),
    )


def _city_token_map(records: list[RestaurantRecord], attr: str) -> dict[str, list[str]]:
    by_city: dict[str, set[str]] = {}
    for record in records:
        city = normalize_city(record.city)
        if not city:
            continue
        by_city.setdefault(city, set()).update(split_tokens(getattr(record, attr)))
    return {city: sorted(by_city[city]) for city in sorted(by_city)}


def build_city_neighborhood_map(records: list[RestaurantRecord]) -> dict[str, list[str]]:
    """Canonical city -> sorted unique neighborhood tokens seen in that city."""
    return _city_token_map(records, "neighborhood")


def build_city_cuisine_map(records: list[RestaurantRecord]) -> dict[str, list[str]]:
    return _city_token_map(records, "cuisine_type")
