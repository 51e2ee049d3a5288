from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType


def freeze(value):
    """Read-only copy of nested dicts and lists; other values pass through."""
    if isinstance(value, MappingProxyType):
        return value
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        items = tuple(freeze(v) for v in value)
        if isinstance(value, tuple) and all(a is b for a, b in zip(items, value)):
            return value
        return items
    return value


def thaw(value):
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value
