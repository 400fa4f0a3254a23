"""Shared CLI utilities for terminal output."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping

from isvalid.core import flags


class C:
    """Terminal colors using ANSI escape codes."""

    _enabled = sys.stdout.isatty() and os.environ.get("NO_COLOR") is None

    BOLD = "\033[1m" if _enabled else ""
    DIM = "\033[2m" if _enabled else ""
    RED = "\033[91m" if _enabled else ""
    GREEN = "\033[92m" if _enabled else ""
    YELLOW = "\033[93m" if _enabled else ""
    CYAN = "\033[96m" if _enabled else ""
    RESET = "\033[0m" if _enabled else ""

    @classmethod
    def bold(cls, s: str) -> str:
        return f"{cls.BOLD}{s}{cls.RESET}"

    @classmethod
    def dim(cls, s: str) -> str:
        return f"{cls.DIM}{s}{cls.RESET}"

    @classmethod
    def green(cls, s: str) -> str:
        return f"{cls.GREEN}{s}{cls.RESET}"

    @classmethod
    def red(cls, s: str) -> str:
        return f"{cls.RED}{s}{cls.RESET}"

    @classmethod
    def yellow(cls, s: str) -> str:
        return f"{cls.YELLOW}{s}{cls.RESET}"

    @classmethod
    def cyan(cls, s: str) -> str:
        return f"{cls.CYAN}{s}{cls.RESET}"


def true_flags(instance: Mapping) -> list[str]:
    """List the type names whose `is<Type>` flag is true, root marker first."""
    parsed = flags.InstanceFlags.from_mapping(instance)
    names = ["app"] if parsed.root else []
    names.extend(name for name, value in parsed.types.items() if value)
    return names


def format_types(types: list[str] | None) -> str:
    """Format a type filter for display."""
    if types is None:
        return "(none)"
    return ", ".join(types) if types else "(empty)"
