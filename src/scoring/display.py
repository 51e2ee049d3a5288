from __future__ import annotations

from src.models.preferences import JobPreferences
from src.scoring.strength import StrengthCategory, StrengthReport

NOT_SET = "Not set"


def boost_suggestions(
    report: StrengthReport,
    limit: int = 3,
) -> tuple[tuple[StrengthCategory, ...], int]:
    """Missing categories to prompt for first, plus how many are left over."""
    missing = report.missing_categories
    return missing[:limit], max(len(missing) - limit, 0)


def skills_preview(skills: tuple[str, ...], limit: int = 3) -> tuple[tuple[str, ...], int]:
    return tuple(skills[:limit]), max(len(skills) - limit, 0)


def salary_display(prefs: JobPreferences) -> str:
    salary = prefs.salary_range
    if salary.is_set:
        return f"{salary.min} - {salary.max}"
    return NOT_SET


def job_types_display(prefs: JobPreferences) -> str:
    if not prefs.job_types:
        return NOT_SET
    return ", ".join(prefs.job_types)


def badge_tally(badges) -> tuple[int, int]:
    earned = sum(1 for b in badges if b.get("earned"))
    return earned, len(badges)


def placeholder_email(name: str) -> str:
    if not name:
        return "email@example.com"
    # Only the first space becomes a dot
    return name.lower().replace(" ", ".", 1) + "@example.com"
