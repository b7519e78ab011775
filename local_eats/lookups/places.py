from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable

import httpx

from ..restaurants.models import RestaurantRecord
from .cache import LookupCache, address_cache, make_key, price_cache
from .config import DEFAULT_LOOKUP_CONFIG, LookupConfig

logger = logging.getLogger(__name__)

# Google price_level 0-4 -> spreadsheet price buckets
_PRICE_LEVELS: dict[int, str] = {0: "$", 1: "$", 2: "$$", 3: "$$$", 4: "$$$$"}


def map_price_level(level: Any) -> str | None:
    if level is None:
        return None
    try:
        return _PRICE_LEVELS.get(int(level))
    except (TypeError, ValueError):
        return None


def _empty_result(status: str, **extra: Any) -> dict[str, Any]:
    return {"status": status, "address": None, "locationCount": 0, "placeId": None, **extra}


def _text_search(query: str, config: LookupConfig) -> list[dict[str, Any]]:
    response = httpx.get(
        config.text_search_url,
        params={"query": query, "type": "restaurant", "key": config.api_key},
        timeout=config.timeout,
    )
    response.raise_for_status()
    data = response.json()
    if data.get("status") == "ZERO_RESULTS":
        return []
    return data.get("results") or []


def _pick_place(name: str, places: list[dict[str, Any]]) -> dict[str, Any]:
    """Choose the best place for ``name`` out of a text-search result list."""
    if not places:
        return _empty_result("not_found")

    if len(places) > 1:
        lower = name.lower()
        named = [
            p for p in places
            if lower in p.get("name", "").lower() or p.get("name", "").lower() in lower
        ]
        if len(named) > 1:
            return {
                "status": "found",
                "address": named[0].get("formatted_address"),
                "locationCount": len(named),
                "placeId": named[0].get("place_id"),
                "note": f"{len(named)} locations found, showing first match",
            }
        if named:
            places = named

    best = places[0]
    return {
        "status": "found",
        "address": best.get("formatted_address"),
        "locationCount": 1,
        "placeId": best.get("place_id"),
    }


def lookup_address(
    name: str,
    city: str,
    neighborhood: str = "",
    config: LookupConfig = DEFAULT_LOOKUP_CONFIG,
    cache: LookupCache = address_cache,
) -> dict[str, Any]:
    """
    Find a restaurant's street address through Google Places.

    Cached results are returned with ``fromCache=True``. Missing API keys and
    failed requests come back as ``no_api_key`` / ``error`` results and are
    not cached.
    """
    key = make_key(name, city, neighborhood)
    cached = cache.get(key)
    if cached is not None:
        return {**cached, "fromCache": True}

    if not config.api_key:
        logger.warning("GOOGLE_PLACES_API_KEY is not set, skipping address lookup")
        return {**_empty_result("no_api_key"), "fromCache": False}

    query = f"{name} {neighborhood} {city}" if neighborhood else f"{name} {city}"
    try:
        result = _pick_place(name, _text_search(query, config))
    except Exception as exc:
        logger.warning("Address lookup failed for %s in %s", name, city, exc_info=True)
        return {**_empty_result("error", error=str(exc)), "fromCache": False}

    result["lookedUpAt"] = datetime.now(timezone.utc).isoformat()
    cache.set(key, result)
    return {**result, "fromCache": False}


def lookup_price_range(
    name: str,
    city: str,
    config: LookupConfig = DEFAULT_LOOKUP_CONFIG,
    cache: LookupCache = price_cache,
) -> dict[str, Any]:
    """Fetch a restaurant's price bucket (``$``..``$$$$``) from Google Places."""
    key = make_key(name, city)
    cached = cache.get(key)
    if cached is not None:
        return {**cached, "fromCache": True}

    if not config.api_key:
        return {"status": "no_api_key", "price": None, "fromCache": False}

    try:
        places = _text_search(f"{name} {city}", config)
    except Exception as exc:
        logger.warning("Price lookup failed for %s in %s", name, city, exc_info=True)
        return {"status": "error", "price": None, "error": str(exc), "fromCache": False}

    price = map_price_level(places[0].get("price_level")) if places else None
    result = {
        "status": "found" if price else "not_found",
        "price": price,
        "fetchedAt": datetime.now(timezone.utc).isoformat(),
    }
    cache.set(key, result)
    return {**result, "fromCache": False}


def batch_lookup_price_ranges(
    records: Iterable[RestaurantRecord],
    config: LookupConfig = DEFAULT_LOOKUP_CONFIG,
    cache: LookupCache = price_cache,
) -> list[dict[str, Any]]:
    """
    Look up prices for every named restaurant, once per name/city pair.

    Each result carries the restaurant ``name`` and ``city`` alongside the
    lookup status. A failed lookup does not stop the batch.
    """
    results: list[dict[str, Any]] = []
    seen: set[str] = set()
    for record in records:
        if not record.name.strip():
            continue
        key = make_key(record.name, record.city)
        if key in seen:
            continue
        seen.add(key)
        result = lookup_price_range(record.name, record.city, config=config, cache=cache)
        results.append({"name": record.name, "city": record.city, **result})

    found = sum(1 for r in results if r["status"] == "found")
    logger.info("Price lookup finished: %d of %d restaurants priced", found, len(results))
    return results
