from __future__ import annotations

import re

TOKEN_SEPARATOR_RE = re.compile(r"[,/]")


def split_tokens(field: object) -> list[str]:
    """Split a compound field such as ``"Italian, French/Spanish"`` into trimmed tokens."""
    if not isinstance(field, str) or not field:
        return []
    return [part.strip() for part in TOKEN_SEPARATOR_RE.split(field) if part.strip()]


def sort_cuisine_type(cuisine_type: str) -> str:
    """Reorder compound cuisine components alphabetically.

    ``"Vietnamese, Taiwanese"`` -> ``"Taiwanese, Vietnamese"`` and
    ``"Italian/Californian"`` -> ``"Californian/Italian"``. A comma wins over a
    slash when both appear.
    """
    if not cuisine_type:
        return cuisine_type

    has_comma = "," in cuisine_type
    if not has_comma and "/" not in cuisine_type:
        return cuisine_type

    separator, joiner = (",", ", ") if has_comma else ("/", "/")
    parts = [p.strip() for p in cuisine_type.split(separator) if p.strip()]
    return joiner.join(sorted(parts, key=str.casefold))
