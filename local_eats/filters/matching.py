from __future__ import annotations

from typing import Iterable

from ..normalization.cities import normalize_city
from ..normalization.dedupe import are_similar
from ..normalization.tokens import split_tokens
from ..restaurants.models import RestaurantRecord
from .models import FilterState


def token_matches(selected: Iterable[str], field: str) -> bool:
    """True if any token of ``field`` equals or resembles any selected value."""
    tokens = split_tokens(field)
    for wanted in selected:
        if not wanted:
            continue
        for token in tokens:
            if wanted.lower() == token.lower() or are_similar(wanted, token):
                return True
    return False


def matches_name(record: RestaurantRecord, name: str) -> bool:
    return not name or record.name == name


def matches_city(record: RestaurantRecord, cities: list[str]) -> bool:
    return not cities or normalize_city(record.city) in cities


def matches_neighborhood(record: RestaurantRecord, neighborhoods: list[str]) -> bool:
    return not neighborhoods or token_matches(neighborhoods, record.neighborhood)


def matches_cuisine(record: RestaurantRecord, cuisines: list[str]) -> bool:
    return not cuisines or token_matches(cuisines, record.cuisine_type)


def matches_reservation(record: RestaurantRecord, reservation: str) -> bool:
    return not reservation or record.reservation_needed == reservation


def matches_price(record: RestaurantRecord, prices: list[str]) -> bool:
    return not prices or record.price_range in prices


def record_matches(record: RestaurantRecord, state: FilterState) -> bool:
    """AND across every filter dimension for a single recommendation."""
    checks = (
        matches_name(record, state.name),
        matches_city(record, state.city),
        matches_neighborhood(record, state.neighborhood),
        matches_cuisine(record, state.cuisine_type),
        matches_reservation(record, state.reservation_needed),
        matches_price(record, state.price_range),
    )
    return all(checks)
