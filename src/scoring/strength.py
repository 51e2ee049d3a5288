from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass

from src.editing.paths import ABSENT, get_path
from src.models.profile import Profile
from src.utils.numbers import percentage


@dataclass(frozen=True)
class StrengthCategory:
    name: str
    fields: tuple[str, ...]
    icon: str  # icon token handed to the UI as-is
    min_count: int | None = None


CATEGORIES: tuple[StrengthCategory, ...] = (
    StrengthCategory("Basic Information", ("name", "position", "location"), "ri-user-line"),
    StrengthCategory("Professional Summary", ("about",), "ri-file-text-line"),
    StrengthCategory("Skills", ("skills",), "ri-tools-line", min_count=3),
    StrengthCategory("Experience", ("experience",), "ri-briefcase-line", min_count=1),
    StrengthCategory("Education", ("education",), "ri-book-open-line"),
    StrengthCategory("Documents", ("documents",), "ri-folder-line", min_count=1),
    StrengthCategory("Profile Image", ("profileImage",), "ri-image-line"),
    StrengthCategory("Career Highlights", ("careerHighlights",), "ri-medal-line", min_count=1),
)

# (upper bound exclusive, label, tone); a score on a bound takes the next bucket
LEVELS = (
    (25, "Just starting", "red"),
    (50, "Getting there", "yellow"),
    (75, "Almost complete", "blue"),
    (100, "Very strong", "teal"),
)
TOP_LEVEL = ("All star profile!", "green")


@dataclass(frozen=True)
class StrengthReport:
    percentage: int
    missing_categories: tuple[StrengthCategory, ...]
    label: str
    tone: str
    segments: tuple[tuple[StrengthCategory, bool], ...]


def _field_passes(profile: Profile, field: str, min_count: int | None) -> bool:
    value = get_path(profile, field)
    if value is ABSENT or value is None:
        return False
    if min_count is not None and isinstance(value, Sized) and not isinstance(value, str):
        return len(value) >= min_count
    return bool(value)


def is_category_complete(profile: Profile, category: StrengthCategory) -> bool:
    return all(_field_passes(profile, f, category.min_count) for f in category.fields)


def strength_level(score: int) -> tuple[str, str]:
    for bound, label, tone in LEVELS:
        if score < bound:
            return label, tone
    return TOP_LEVEL


def evaluate_strength(profile: Profile) -> StrengthReport:
    segments = tuple((c, is_category_complete(profile, c)) for c in CATEGORIES)
    complete = sum(1 for _, done in segments if done)
    score = percentage(complete, len(CATEGORIES))
    label, tone = strength_level(score)

    return StrengthReport(
        percentage=score,
        missing_categories=tuple(c for c, done in segments if not done),
        label=label,
        tone=tone,
        segments=segments,
    )
