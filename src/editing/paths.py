from __future__ import annotations

from collections.abc import Mapping
from dataclasses import is_dataclass, replace
from enum import Enum
from typing import Any, Union

from src.errors import InvalidFieldType
from src.utils.text import snake_case


class _Absent:
    """Marker returned by ``get_path`` when a segment does not exist."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


class LeafKind(Enum):
    TEXT = "text"
    OPTIONAL_TEXT = "optional_text"
    FLAG = "flag"


class ProfileField(Enum):
    """Named leaves the profile form edits."""

    NAME = ("name", LeafKind.TEXT)
    POSITION = ("position", LeafKind.TEXT)
    LOCATION = ("location", LeafKind.TEXT)
    ABOUT = ("about", LeafKind.TEXT)
    PROFILE_IMAGE = ("profileImage", LeafKind.OPTIONAL_TEXT)
    PREFERRED_LOCATION = ("preferences.location", LeafKind.TEXT)
    SALARY_MIN = ("preferences.salaryRange.min", LeafKind.TEXT)
    SALARY_MAX = ("preferences.salaryRange.max", LeafKind.TEXT)
    NOTIFY_JOBS = ("preferences.notifications.jobs", LeafKind.FLAG)
    NOTIFY_STATUS = ("preferences.notifications.status", LeafKind.FLAG)
    NOTIFY_MESSAGES = ("preferences.notifications.messages", LeafKind.FLAG)

    def __init__(self, dotted: str, kind: LeafKind):
        self.dotted = dotted
        self.kind = kind

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self.dotted.split("."))


Path = Union[ProfileField, str, tuple]

def parse_path(dotted: str) -> tuple[str, ...]:
    segments = tuple(dotted.split("."))
    if any(not s for s in segments):
        raise ValueError(f"Malformed path: {dotted!r}")
    return segments


def to_segments(path: Path) -> tuple[str, ...]:
    if isinstance(path, ProfileField):
        return path.segments
    if isinstance(path, str):
        return parse_path(path)
    segments = tuple(path)
    if not segments or any(not isinstance(s, str) or not s for s in segments):
        raise ValueError(f"Malformed path: {path!r}")
    return segments


def describe(path: Path) -> str:
    if isinstance(path, ProfileField):
        return path.dotted
    if isinstance(path, str):
        return path
    return ".".join(path)


def canonical_segments(root: Any, path: Path) -> tuple[str, ...]:
    """Spell each segment the way ``root`` stores it.

    Record fields accept camelCase or snake_case; mapping keys are matched
    verbatim.
    """
    node = root
    resolved: list[str] = []
    for segment in to_segments(path):
        if _is_record(node):
            name = _attr_name(node, segment)
            resolved.append(name or segment)
            node = getattr(node, name) if name else ABSENT
        else:
            resolved.append(segment)
            node = _child(node, segment)
    return tuple(resolved)


def lookup_field(path: Path, root: Any = None) -> ProfileField | None:
    """Return the named leaf a path refers to within ``root``.

    Without a root only the exact dotted spelling matches.
    """
    if isinstance(path, ProfileField):
        return path
    if root is None:
        segments = to_segments(path)
        return next((f for f in ProfileField if f.segments == segments), None)
    key = canonical_segments(root, path)
    return next((f for f in ProfileField if canonical_segments(root, f) == key), None)


def _is_record(node: Any) -> bool:
    return is_dataclass(node) and not isinstance(node, type)


def _attr_name(record: Any, segment: str) -> str | None:
    names = record.__dataclass_fields__
    if segment in names:
        return segment
    snake = snake_case(segment)
    return snake if snake in names else None


def _child(node: Any, segment: str) -> Any:
    if _is_record(node):
        name = _attr_name(node, segment)
        return getattr(node, name) if name else ABSENT
    if isinstance(node, Mapping):
        return node.get(segment, ABSENT)
    return ABSENT


def get_path(root: Any, path: Path) -> Any:
    node = root
    for segment in to_segments(path):
        node = _child(node, segment)
        if node is ABSENT:
            return ABSENT
    return node


def set_path(root: Any, path: Path, value: Any) -> Any:
    """Return a copy of ``root`` with the leaf at ``path`` replaced.

    Every container between the root and the leaf is rebuilt; everything
    else is shared with ``root``, which is left untouched. Missing mapping
    keys along the way become empty dicts.
    """
    return _assign(root, to_segments(path), value, describe(path))


def _assign(node: Any, segments: tuple[str, ...], value: Any, dotted: str) -> Any:
    head, rest = segments[0], segments[1:]

    if _is_record(node):
        name = _attr_name(node, head)
        if name is None:
            raise InvalidFieldType(dotted, f"{type(node).__name__} has no field {head!r}")
        new_child = _assign(getattr(node, name), rest, value, dotted) if rest else value
        return replace(node, **{name: new_child})

    if isinstance(node, Mapping):
        if rest:
            child = node.get(head, ABSENT)
            if child is ABSENT:
                child = {}
            new_child = _assign(child, rest, value, dotted)
        else:
            new_child = value
        updated = dict(node)
        updated[head] = new_child
        return updated

    raise InvalidFieldType(dotted, f"cannot descend into {type(node).__name__} at {head!r}")
