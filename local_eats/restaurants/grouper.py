from __future__ import annotations

import re
from typing import Iterable

from ..normalization.tokens import split_tokens
from .models import RestaurantGroup, RestaurantRecord

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_restaurant_name(name: object) -> str:
    if not isinstance(name, str):
        return ""
    return _WHITESPACE_RE.sub(" ", name.strip().lower())


def group_restaurants_by_name(records: Iterable[RestaurantRecord]) -> list[RestaurantGroup]:
    """Group recommendations by exact normalized name, in order of first appearance.

    Records whose name normalizes to an empty string are skipped. Names that
    only look alike ("Cafe Roma" / "Caffe Roma") stay separate groups.
    """
    groups: dict[str, RestaurantGroup] = {}

    for record in records:
        key = normalize_restaurant_name(record.name)
        if not key:
            continue
        group = groups.get(key)
        if group is None:
            group = RestaurantGroup(id=key, name=record.name, recommendations=[])
            groups[key] = group
        group.recommendations.append(record)

    return list(groups.values())


def flatten_groups(groups: Iterable[RestaurantGroup]) -> list[RestaurantRecord]:
    return [record for group in groups for record in group.recommendations]


def first_alphabetical_cuisine(group: RestaurantGroup) -> str:
    """First cuisine token (case-insensitive) across the group, or ``""``."""
    tokens = [
        token
        for record in group.recommendations
        for token in split_tokens(record.cuisine_type)
    ]
    if not tokens:
        return ""
    return min(tokens, key=str.casefold)
