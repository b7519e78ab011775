from __future__ import annotations

import re

SAN_FRANCISCO = "San Francisco"
NEW_YORK_CITY = "New York City"

_WHITESPACE_RE = re.compile(r"\s+")
_PARENTHETICAL_RE = re.compile(r"\s*\([^)]*\)")
_MULTIPLE_LOCATIONS_SUFFIX_RE = re.compile(r",\s*multiple\s+locations?.*", re.IGNORECASE)
_STATE_CODE_SUFFIX_RE = re.compile(r",\s*[A-Za-z]{2}\s*$")


def normalize_city(city: object) -> str:
    """Map a free-text city to its canonical filter value.

    ``"SF"`` and anything containing "san francisco" become ``"San Francisco"``;
    ``"NYC"`` and anything containing "new york" become ``"New York City"``.
    Those two checks run first and win over every other rule. Everything else
    only loses a "multiple locations" note and a trailing ``", XX"`` state code.
    """
    if not isinstance(city, str):
        return ""

    cleaned = _WHITESPACE_RE.sub(" ", city.strip())
    lower = cleaned.lower()

    if "san francisco" in lower or lower == "sf":
        return SAN_FRANCISCO
    if "new york" in lower or lower == "nyc":
        return NEW_YORK_CITY

    if "multiple location" in lower:
        cleaned = _PARENTHETICAL_RE.sub("", cleaned).strip()
        cleaned = _MULTIPLE_LOCATIONS_SUFFIX_RE.sub("", cleaned).strip()

    cleaned = _STATE_CODE_SUFFIX_RE.sub("", cleaned).strip()
    return cleaned


def has_multiple_locations(city: object) -> bool:
    """True when the raw city field mentions "multiple locations"."""
    if not isinstance(city, str):
        return False
    return "multiple locations" in city.lower()
