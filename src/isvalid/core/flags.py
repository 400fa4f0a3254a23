"""Instance flag lookup and the explicit flag model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from numbers import Number

ROOT_KEY = "isApp"
NAME_KEY = "_name"
FLAG_PREFIX = "is"

# values that are never instances, even though they are python objects
_NON_OBJECT_TYPES = (str, bytes, bytearray, memoryview, list, tuple, set, frozenset, range)


def flag_key(name: str) -> str:
    """Build the flag key for a type name.

    e.g., 'foo' -> 'isFoo', 'viewCollection' -> 'isViewCollection'
    """
    return f"{FLAG_PREFIX}{name[:1].upper()}{name[1:]}"


def is_object(value: object) -> bool:
    """Check if value is something flags can be read from (a mapping or plain object)."""
    if value is None or isinstance(value, (bool, Number, type)):
        return False
    if isinstance(value, Mapping):
        return True
    return not isinstance(value, _NON_OBJECT_TYPES)


def read_flag(candidate: object, key: str) -> object:
    """Read a flag from a mapping (by key) or any other object (by attribute).

    Missing flags, and lookups that blow up, read as None.
    """
    if isinstance(candidate, InstanceFlags):
        candidate = candidate.to_dict()
    try:
        if isinstance(candidate, Mapping):
            return candidate.get(key)
        return getattr(candidate, key, None)
    except Exception:  # noqa: BLE001 - foreign objects may raise anything from __getattr__
        return None


def read_name(candidate: object) -> str | None:
    """Return the declared `_name` of a candidate, if it is a string."""
    name = read_flag(candidate, NAME_KEY)
    return name if isinstance(name, str) else None


@dataclass
class InstanceFlags:
    """Explicit form of the flags an instance carries.

    - root: the `isApp` marker
    - types: type name -> flag, e.g. {"collection": True} for `isCollection`
    - name: declared type name (`_name`)
    """

    root: bool = False
    types: dict[str, bool] = field(default_factory=dict)
    name: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Convert to the mapping form instances carry (`isApp`, `is<Type>`, `_name`)."""
        data: dict[str, object] = {ROOT_KEY: self.root}
        for type_name, value in self.types.items():
            key = flag_key(type_name)
            if key == ROOT_KEY:
                continue  # root flag always comes from `root`
            data[key] = value
        if self.name is not None:
            data[NAME_KEY] = self.name
        return data

    @classmethod
    def from_mapping(cls, data: Mapping) -> InstanceFlags:
        """Parse flags from the mapping form.

        Only boolean values under `is<Upper...>` keys are kept as type flags.
        """
        types: dict[str, bool] = {}
        for key, value in data.items():
            if key == ROOT_KEY or not isinstance(key, str) or not isinstance(value, bool):
                continue
            suffix = key[len(FLAG_PREFIX) :]
            if key.startswith(FLAG_PREFIX) and suffix[:1].isupper():
                types[suffix[:1].lower() + suffix[1:]] = value

        name = data.get(NAME_KEY)
        return cls(
            root=data.get(ROOT_KEY) is True,
            types=types,
            name=name if isinstance(name, str) else None,
        )
