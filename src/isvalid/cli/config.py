"""Configuration loading for the isvalid CLI."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from isvalid.core import flags

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".isvalid.yml"


@dataclass
class Config:
    """Instances and named filters loaded from an isvalid config file.

    - instances: label -> flag mapping (`isApp`, `is<Type>`, `_name`)
    - filters: filter name -> ordered list of type names
    """

    instances: dict[str, dict] = field(default_factory=dict)
    filters: dict[str, list[str]] = field(default_factory=dict)


def find_config(start: Path) -> Path | None:
    """Find the nearest config file, looking in start and then its parents."""
    current = start.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            logger.debug("found config at %s", candidate)
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def parse_types(value, where: str) -> list[str]:
    """Parse a type filter from YAML (string or list of strings)."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ValueError(f"{where}: expected a type name or a list of type names, got {value!r}")


def parse_cli_types(values: tuple[str, ...] | list[str]) -> list[str]:
    """Parse type names from CLI arguments (e.g., 'view' 'app' or 'view,app')."""
    names = [part.strip() for value in values for part in value.split(",")]
    names = [n for n in names if n]
    if not names:
        raise ValueError(f"No type names in {' '.join(values)!r}")
    return names


def parse_instances(data) -> dict[str, dict]:
    """Parse the `instances` section.

    The instance label is used as `_name` when the entry does not declare one.
    """
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"instances: expected a mapping of label -> flags, got {type(data).__name__}")

    result = {}
    for label, entry in data.items():
        if entry is None:
            entry = {}
        if not isinstance(entry, Mapping):
            raise ValueError(f"instances.{label}: expected a mapping of flags, got {type(entry).__name__}")
        instance = dict(entry)
        instance.setdefault(flags.NAME_KEY, str(label))
        result[str(label)] = instance

    return result


def parse_filters(data) -> dict[str, list[str]]:
    """Parse the `filters` section into name -> type names."""
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"filters: expected a mapping of name -> types, got {type(data).__name__}")
    return {str(name): parse_types(value, f"filters.{name}") for name, value in data.items()}


def parse_config_data(data) -> Config:
    """Parse a config from loaded YAML data."""
    if data is None:
        return Config()
    if not isinstance(data, Mapping):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

    return Config(
        instances=parse_instances(data.get("instances")),
        filters=parse_filters(data.get("filters")),
    )


def load_config(yaml_path: Path) -> Config:
    """Load a config file.

    Raises ValueError for malformed YAML or an unexpected structure.
    """
    with open(yaml_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

    config = parse_config_data(data)
    logger.info("loaded %d instances and %d filters from %s", len(config.instances), len(config.filters), yaml_path)
    return config
