from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any

from .config import DEFAULT_LOOKUP_CONFIG

logger = logging.getLogger(__name__)


def make_key(*parts: str | None) -> str:
    """Join lookup fields as ``name|city|neighborhood``, lowercased."""
    return "|".join((p or "").strip().lower() for p in parts)


class LookupCache:
    """In-memory lookup results, optionally mirrored to a JSON file.

    Entries carry a ``cachedAt`` epoch timestamp; when ``max_age`` is set,
    older entries are dropped on read. A file that cannot be written leaves
    the cache working in memory only.
    """

    def __init__(self, path: Path | None = None, max_age: float | None = None) -> None:
        self.path = path
        self.max_age = max_age
        self._entries: dict[str, dict[str, Any]] = {}
        self._hits = 0
        self._misses = 0
        self._load()

    def _load(self) -> None:
        if self.path is None or not self.path.exists():
            return
        try:
            self._entries = json.loads(self.path.read_text(encoding="utf-8"))
            logger.info("Loaded %d cached lookups from %s", len(self._entries), self.path)
        except (OSError, ValueError):
            logger.warning("Could not read lookup cache %s, starting empty", self.path, exc_info=True)
            self._entries = {}

    def _persist(self) -> None:
        if self.path is None:
            return
        if not self._entries and not self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._entries, indent=2), encoding="utf-8")
        except OSError:
            logger.warning("Could not save lookup cache to %s (in-memory only)", self.path, exc_info=True)

    def get(self, key: str) -> dict[str, Any] | None:
        entry = self._entries.get(key)
        if entry is not None and self.max_age is not None:
            if time.time() - entry.get("cachedAt", 0) >= self.max_age:
                del self._entries[key]
                entry = None
        if entry is None:
            self._misses += 1
            logger.debug("Lookup cache miss for %s", key)
            return None
        self._hits += 1
        logger.debug("Lookup cache hit for %s", key)
        return entry

    def set(self, key: str, value: dict[str, Any]) -> None:
        self._entries[key] = {**value, "cachedAt": time.time()}
        self._persist()

    def entries(self) -> dict[str, dict[str, Any]]:
        return dict(self._entries)

    def stats(self) -> dict:
        total = self._hits + self._misses
        return {
            "size": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
        }

    def clear(self) -> None:
        self._entries.clear()
        self._hits = 0
        self._misses = 0
        self._persist()


address_cache = LookupCache(path=DEFAULT_LOOKUP_CONFIG.address_cache_path)
price_cache = LookupCache(max_age=DEFAULT_LOOKUP_CONFIG.price_cache_max_age)


def get_cache_stats() -> dict:
    return {"address": address_cache.stats(), "price": price_cache.stats()}


def clear_cache() -> None:
    address_cache.clear()
    price_cache.clear()
