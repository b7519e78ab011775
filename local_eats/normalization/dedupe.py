from __future__ import annotations

from collections import Counter
from typing import Iterable

from .similarity import are_similar

__all__ = ["are_similar", "deduplicate_similar"]


def _cluster(forms: list[str]) -> list[list[str]]:
    """Greedy single-seed clustering: a form joins the first seed it resembles."""
    clusters: list[list[str]] = []
    clustered: set[str] = set()

    for seed in forms:
        if seed in clustered:
            continue
        cluster = [seed]
        clustered.add(seed)
        for other in forms:
            if other in clustered:
                continue
            if are_similar(seed, other):
                cluster.append(other)
                clustered.add(other)
        clusters.append(cluster)

    return clusters


def deduplicate_similar(items: Iterable[object]) -> list[str]:
    """Collapse near-duplicate labels into one representative each.

    The representative of a cluster is its most frequent spelling, shorter
    spellings winning ties; it is returned with the casing it first appeared
    in. The result is sorted.
    """
    counts: Counter[str] = Counter()
    first_seen: dict[str, str] = {}

    for item in items:
        if not isinstance(item, str):
            continue
        normalized = item.strip().lower()
        if not normalized:
            continue
        first_seen.setdefault(normalized, item.strip())
        counts[normalized] += 1

    representatives: list[str] = []
    for cluster in _cluster(list(first_seen)):
        best = sorted(cluster, key=lambda form: (-counts[form], len(form)))[0]
        representatives.append(first_seen[best])

    return sorted(representatives)
