from __future__ import annotations

SHORT_TOKEN_LENGTH = 3
SHORT_STRING_LENGTH = 5
MAX_EDITS = 2
MIN_SIMILARITY_RATIO = 0.85


def levenshtein_distance(a: str, b: str) -> int:
    """Return the number of single-character edits needed to turn ``a`` into ``b``."""
    if len(a) < len(b):
        a, b = b, a

    # Two rolling rows of the (len(a)+1) x (len(b)+1) table
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current[j] = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
        previous = current

    return previous[len(b)]


def _normalize_for_comparison(value: object) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def are_similar(a: str, b: str) -> bool:
    """Heuristic typo/variant check, e.g. ``"SoHo"`` vs ``"Soho"``."""
    norm_a = _normalize_for_comparison(a)
    norm_b = _normalize_for_comparison(b)

    if norm_a == norm_b:
        return True

    # Short tokens ("BBQ", "NY") only match exactly
    if len(norm_a) <= SHORT_TOKEN_LENGTH or len(norm_b) <= SHORT_TOKEN_LENGTH:
        return False

    distance = levenshtein_distance(norm_a, norm_b)
    max_len = max(len(norm_a), len(norm_b))

    if max_len <= SHORT_STRING_LENGTH:
        return distance <= MAX_EDITS

    ratio = 1 - distance / max_len
    return distance <= MAX_EDITS or ratio >= MIN_SIMILARITY_RATIO
