from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from src.editing.paths import (
    ABSENT,
    LeafKind,
    Path,
    describe,
    get_path,
    lookup_field,
    set_path,
    to_segments,
)
from src.errors import DraftClosedError, InvalidFieldType
from src.models.profile import EXPERIENCE_FIELDS, ExperienceEntry, Profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedPreferences:
    """Summary the caller forwards to its job-search preferences."""

    location: str
    role: str
    top_skill: str


@dataclass(frozen=True)
class CommitResult:
    profile: Profile
    derived: DerivedPreferences


def derive_preferences(profile: Profile) -> DerivedPreferences:
    return DerivedPreferences(
        location=profile.preferences.location,
        role=profile.position,
        top_skill=profile.top_skill,
    )


def _leaf_kind(root: Any, path: Path, current: Any) -> LeafKind | None:
    named = lookup_field(path, root)
    if named is not None:
        return named.kind
    if isinstance(current, bool):
        return LeafKind.FLAG
    if isinstance(current, str):
        return LeafKind.TEXT
    if current is None:
        return LeafKind.OPTIONAL_TEXT
    if current is ABSENT:
        # New keys inside a mapping take either a flag or text
        return None
    raise InvalidFieldType(describe(path), f"{type(current).__name__} is not an editable leaf")


def _check_value(path: Path, kind: LeafKind | None, value: Any) -> None:
    dotted = describe(path)
    if kind is LeafKind.FLAG and not isinstance(value, bool):
        raise InvalidFieldType(dotted, f"expected bool, got {type(value).__name__}")
    if kind is LeafKind.TEXT and not isinstance(value, str):
        raise InvalidFieldType(dotted, f"expected str, got {type(value).__name__}")
    if kind is LeafKind.OPTIONAL_TEXT and value is not None and not isinstance(value, str):
        raise InvalidFieldType(dotted, f"expected str or None, got {type(value).__name__}")
    if kind is None and not isinstance(value, (str, bool)):
        raise InvalidFieldType(dotted, f"expected str or bool, got {type(value).__name__}")


def _inside_mapping(root: Any, segments: tuple[str, ...]) -> bool:
    # New toggles may only be created under a mapping, never on a record
    for end in range(len(segments) - 1, 0, -1):
        node = get_path(root, segments[:end])
        if node is not ABSENT:
            return isinstance(node, Mapping)
    return False


class DraftSession:
    """Working copy of a profile that is edited, then committed or discarded.

    Each edit swaps in a new immutable snapshot, so an edit that raises
    leaves the draft exactly as it was. Out-of-range indices and redundant
    edits are ignored.
    """

    def __init__(self, profile: Profile, store: ProfileStore | None = None):
        self._origin = profile
        self._draft = profile
        self._store = store
        self._open = True

    def __repr__(self) -> str:
        state = "open" if self._open else "closed"
        return f"<DraftSession {state} dirty={self.is_dirty}>"

    @property
    def profile(self) -> Profile:
        return self._draft

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def is_dirty(self) -> bool:
        return self._draft != self._origin

    def _ensure_open(self) -> None:
        if not self._open:
            raise DraftClosedError("Draft already committed or discarded; start a new one")

    # -- fields -------------------------------------------------------------

    def set_field(self, path: Path, value: Any) -> None:
        self._ensure_open()
        segments = to_segments(path)
        current = get_path(self._draft, segments)
        _check_value(path, _leaf_kind(self._draft, path, current), value)
        self._draft = set_path(self._draft, path, value)

    def set_toggle(self, path: Path, flag: bool) -> None:
        self._ensure_open()
        segments = to_segments(path)
        current = get_path(self._draft, segments)
        kind = _leaf_kind(self._draft, path, current)
        if kind not in (LeafKind.FLAG, None):
            raise InvalidFieldType(describe(path), "not a toggle")
        if current is ABSENT and not _inside_mapping(self._draft, segments):
            raise InvalidFieldType(describe(path), "toggles live inside a mapping")
        _check_value(path, LeafKind.FLAG, flag)
        self._draft = set_path(self._draft, path, flag)

    # -- skills -------------------------------------------------------------

    def add_skill(self, text: str) -> None:
        self._ensure_open()
        skill = text.strip()
        if not skill or skill in self._draft.skills:
            logger.debug("Ignoring skill %r: blank or already present", text)
            return
        self._draft = replace(self._draft, skills=self._draft.skills + (skill,))

    def remove_skill(self, text: str) -> None:
        self._ensure_open()
        if text not in self._draft.skills:
            logger.debug("Ignoring removal of unknown skill %r", text)
            return
        remaining = tuple(s for s in self._draft.skills if s != text)
        self._draft = replace(self._draft, skills=remaining)

    # -- job types ----------------------------------------------------------

    def set_job_type(self, job_type: str, included: bool) -> None:
        self._ensure_open()
        prefs = self._draft.preferences
        present = job_type in prefs.job_types
        if included and not present:
            job_types = prefs.job_types + (job_type,)
        elif not included and present:
            job_types = tuple(t for t in prefs.job_types if t != job_type)
        else:
            return
        self._draft = replace(self._draft, preferences=replace(prefs, job_types=job_types))

    # -- experience ---------------------------------------------------------

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._draft.experience)

    def add_experience_entry(self) -> int:
        self._ensure_open()
        experience = self._draft.experience + (ExperienceEntry(),)
        self._draft = replace(self._draft, experience=experience)
        return len(experience) - 1

    def update_experience_field(self, index: int, field: str, value: str) -> None:
        self._ensure_open()
        if field not in EXPERIENCE_FIELDS:
            raise InvalidFieldType(f"experience.{field}", "unknown experience field")
        if not isinstance(value, str):
            raise InvalidFieldType(f"experience.{field}", f"expected str, got {type(value).__name__}")
        if not self._in_range(index):
            logger.debug("Ignoring update of experience[%s]: out of range", index)
            return
        experience = list(self._draft.experience)
        experience[index] = replace(experience[index], **{field: value})
        self._draft = replace(self._draft, experience=tuple(experience))

    def remove_experience_entry(self, index: int) -> None:
        self._ensure_open()
        if not self._in_range(index):
            logger.debug("Ignoring removal of experience[%s]: out of range", index)
            return
        experience = self._draft.experience[:index] + self._draft.experience[index + 1:]
        self._draft = replace(self._draft, experience=experience)

    # -- lifecycle ----------------------------------------------------------

    def commit(self) -> CommitResult:
        self._ensure_open()
        self._open = False
        profile = self._draft
        if self._store is not None:
            self._store._promote(profile)
        logger.info("Profile committed (changed=%s)", profile != self._origin)
        return CommitResult(profile=profile, derived=derive_preferences(profile))

    def discard(self) -> None:
        self._ensure_open()
        self._open = False
        logger.info("Profile draft discarded")


class ProfileStore:
    """Holds the canonical profile. Only a committing draft replaces it."""

    def __init__(self, profile: Profile | None = None):
        self._profile = profile if profile is not None else Profile()

    @property
    def profile(self) -> Profile:
        return self._profile

    def begin_edit(self) -> DraftSession:
        return DraftSession(self._profile, store=self)

    def _promote(self, profile: Profile) -> None:
        self._profile = profile


def create_draft(profile: Profile) -> DraftSession:
    return DraftSession(profile)


def commit(draft: DraftSession) -> CommitResult:
    return draft.commit()


def discard(draft: DraftSession) -> None:
    draft.discard()
