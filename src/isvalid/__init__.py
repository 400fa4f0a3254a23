"""Check whether a value is a recognized instance a plugin should operate on."""

from .core.flags import InstanceFlags
from .core.validator import is_valid_instance, partition_instances

__all__ = [
    "InstanceFlags",
    "is_valid_instance",
    "partition_instances",
]
