"""Type filter normalization."""

from __future__ import annotations

from collections.abc import Iterable

# tokens that accept any recognized instance
WILDCARDS = ("*", "any")


def normalize_types(types: object) -> list[str]:
    """Normalize a type filter into an ordered list of names.

    - 'view' -> ['view']
    - ['view', 'app'] -> ['view', 'app']
    - non-string entries are dropped, anything else gives []
    """
    if isinstance(types, str):
        return [types]
    if not isinstance(types, Iterable):
        return []
    try:
        return [t for t in types if isinstance(t, str)]
    except Exception:  # noqa: BLE001 - iterating a foreign object may raise anything
        return []


def has_wildcard(names: list[str]) -> bool:
    """Check if any name is a wildcard token (case-sensitive)."""
    return any(name in WILDCARDS for name in names)
