"""Instance validation for plugins."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from . import filters, flags

T = TypeVar("T")


def is_valid_instance(candidate: object, types: str | Iterable[str] | None = None) -> bool:
    """Check if candidate is a recognized instance a plugin should run on.

    The candidate must carry the root marker (`isApp is True`). Without types
    that is enough; with types, any one name has to match, either through its
    `is<Name>` flag or through the candidate's `_name` (case-insensitive).
    Wildcards '*' and 'any' accept every recognized instance.

    Never raises: anything unexpected is simply not a valid instance.
    """
    if not flags.is_object(candidate):
        return False

    if flags.read_flag(candidate, flags.ROOT_KEY) is not True:
        return False

    if types is None:
        return True

    names = filters.normalize_types(types)
    if filters.has_wildcard(names):
        return True

    declared = flags.read_name(candidate)
    declared = declared.lower() if declared is not None else None

    # first match wins; a false flag only rules out its own name
    for name in names:
        if flags.read_flag(candidate, flags.flag_key(name)) is True:
            return True
        if declared is not None and declared == name.lower():
            return True

    return False


def partition_instances(
    instances: Iterable[T],
    types: str | Iterable[str] | None = None,
    key: Callable[[T], object] | None = None,
) -> tuple[list[T], list[T]]:
    """Split instances into (hits, misses) by is_valid_instance, keeping input order.

    If key is given, it extracts the candidate to check from each item,
    e.g. `key=lambda item: item[1]` for (label, instance) pairs.
    """
    hits: list[T] = []
    misses: list[T] = []
    for inst in instances:
        candidate = inst if key is None else key(inst)
        if is_valid_instance(candidate, types):
            hits.append(inst)
        else:
            misses.append(inst)
    return hits, misses
