from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from src.models.profile import Profile
from src.utils.numbers import percentage

ABOUT_MIN_LENGTH = 20
MIN_SKILLS = 3

CHECKS: dict[str, Callable[[Profile], bool]] = {
    "Basic Info": lambda p: bool(p.name and p.position and p.location),
    "About Me": lambda p: len(p.about) > ABOUT_MIN_LENGTH,
    "Skills": lambda p: len(p.skills) >= MIN_SKILLS,
    "Experience": lambda p: len(p.experience) > 0,
    "Resume": lambda p: len(p.documents) > 0,
    "Job Preferences": lambda p: bool(p.preferences.location),
}


@dataclass(frozen=True)
class CompletenessReport:
    percentage: int
    completed: tuple[str, ...]
    pending: tuple[str, ...]


def evaluate_completeness(profile: Profile) -> CompletenessReport:
    completed: list[str] = []
    pending: list[str] = []

    for name, check in CHECKS.items():
        if check(profile):
            completed.append(name)
        else:
            pending.append(name)

    return CompletenessReport(
        percentage=percentage(len(completed), len(CHECKS)),
        completed=tuple(completed),
        pending=tuple(pending),
    )
