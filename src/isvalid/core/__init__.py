"""Core instance validation: flag lookup, filter normalization, and the predicate."""

from . import filters, flags, validator

__all__ = [
    "filters",
    "flags",
    "validator",
]
