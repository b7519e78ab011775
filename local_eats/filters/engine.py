from __future__ import annotations

from typing import Any

from ..normalization.cities import normalize_city
from ..normalization.dedupe import are_similar
from ..restaurants.grouper import first_alphabetical_cuisine
from ..restaurants.models import RestaurantGroup
from .facets import cuisine_options, neighborhood_options
from .matching import record_matches
from .models import (
    MULTI_VALUE_DIMENSIONS,
    STATE_FIELDS,
    FilterAction,
    FilterDimension,
    FilterState,
)


def default_state() -> FilterState:
    return FilterState()


def reset_filters() -> FilterState:
    return default_state()


def has_active_filters(state: FilterState) -> bool:
    return any((
        state.name,
        state.city,
        state.neighborhood,
        state.cuisine_type,
        state.reservation_needed,
        state.price_range,
    ))


def _clean_values(value: Any) -> list[str]:
    """Coerce a multi-select value into a trimmed, duplicate-free list."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    cleaned: list[str] = []
    for item in value:
        if not isinstance(item, str):
            continue
        item = item.strip()
        if item and item not in cleaned:
            cleaned.append(item)
    return cleaned


def _clean_single(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


def _keep_valid(selection: list[str], options: list[str]) -> list[str]:
    """Keep selected labels that still match (or resemble) an offered option."""
    return [
        s for s in selection
        if any(s.lower() == o.lower() or are_similar(s, o) for o in options)
    ]


def set_filter(
    groups: list[RestaurantGroup],
    state: FilterState,
    dimension: FilterDimension | str,
    value: Any,
) -> FilterState:
    """Return the state that results from changing one filter dimension.

    Changing the city always clears the neighborhood and cuisine picks.
    Picking neighborhoods drops cuisine picks no longer offered for them, and
    picking cuisines drops neighborhood picks no longer offered for them.
    Other dimensions change only themselves.
    """
    dimension = FilterDimension(dimension)
    field = STATE_FIELDS[dimension]

    if dimension in MULTI_VALUE_DIMENSIONS:
        cleaned: Any = _clean_values(value)
        if dimension is FilterDimension.city:
            cleaned = _clean_values([normalize_city(c) for c in cleaned])
    else:
        cleaned = _clean_single(value)

    # the returned state shares no lists with ``state``
    updated = state.model_copy(update={field: cleaned}, deep=True)

    if dimension is FilterDimension.city:
        return updated.model_copy(update={"neighborhood": [], "cuisine_type": []})

    if dimension is FilterDimension.neighborhood and cleaned:
        valid = cuisine_options(groups, updated)
        return updated.model_copy(
            update={"cuisine_type": _keep_valid(state.cuisine_type, valid)}
        )

    if dimension is FilterDimension.cuisine_type and cleaned:
        valid = neighborhood_options(groups, updated)
        return updated.model_copy(
            update={"neighborhood": _keep_valid(state.neighborhood, valid)}
        )

    return updated


def reduce_filters(
    groups: list[RestaurantGroup],
    state: FilterState,
    action: FilterAction,
) -> FilterState:
    if action.type == "reset":
        return reset_filters()
    if action.dimension is None:
        raise ValueError("A 'set' action needs a dimension")
    return set_filter(groups, state, action.dimension, action.value)


def apply_filters(groups: list[RestaurantGroup], state: FilterState) -> list[RestaurantGroup]:
    """Keep groups with at least one recommendation matching every active filter.

    Results are ordered by each group's first alphabetical cuisine; groups
    without any cuisine come first.
    """
    kept = [
        group for group in groups
        if any(record_matches(record, state) for record in group.recommendations)
    ]
    return sorted(kept, key=lambda g: first_alphabetical_cuisine(g).casefold())
