from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields

from src.models.preferences import JobPreferences
from src.utils.frozen import freeze, thaw
from src.utils.text import is_blank, snake_keys


def _clean_skills(skills) -> tuple[str, ...]:
    already_clean = all(s and s == s.strip() for s in skills) and len(set(skills)) == len(skills)
    if isinstance(skills, tuple) and already_clean:
        return skills
    cleaned: list[str] = []
    for skill in skills:
        if is_blank(skill):
            continue
        skill = skill.strip()
        if skill not in cleaned:
            cleaned.append(skill)
    return tuple(cleaned)


@dataclass(frozen=True)
class ExperienceEntry:
    company: str = ""
    position: str = ""
    period: str = ""
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "company": self.company,
            "position": self.position,
            "period": self.period,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ExperienceEntry:
        return cls(**{k: str(v or "") for k, v in data.items() if k in cls.__dataclass_fields__})


EXPERIENCE_FIELDS = tuple(f.name for f in fields(ExperienceEntry))


@dataclass(frozen=True)
class Profile:
    name: str = ""
    position: str = ""
    location: str = ""
    about: str = ""
    profile_image: str | None = None
    skills: tuple[str, ...] = ()
    experience: tuple[ExperienceEntry, ...] = ()
    # Supplied from outside the core; only presence and length are inspected
    education: tuple = ()
    documents: tuple = ()
    badges: tuple = ()
    career_highlights: tuple = ()
    profile_insights: Mapping = field(default_factory=dict)
    preferences: JobPreferences = field(default_factory=JobPreferences)

    def __post_init__(self):
        object.__setattr__(self, "skills", _clean_skills(self.skills))
        if not isinstance(self.experience, tuple):
            object.__setattr__(self, "experience", tuple(self.experience))
        # Opaque sub-records are stored read-only so drafts cannot leak edits
        for name in ("education", "documents", "badges", "career_highlights", "profile_insights"):
            object.__setattr__(self, name, freeze(getattr(self, name)))

    @property
    def top_skill(self) -> str:
        return self.skills[0] if self.skills else ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "position": self.position,
            "location": self.location,
            "about": self.about,
            "profile_image": self.profile_image,
            "skills": list(self.skills),
            "experience": [e.to_dict() for e in self.experience],
            "education": thaw(self.education),
            "documents": thaw(self.documents),
            "badges": thaw(self.badges),
            "career_highlights": thaw(self.career_highlights),
            "profile_insights": thaw(self.profile_insights),
            "preferences": self.preferences.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Profile:
        # Accepts both snake_case and the camelCase keys used by the web client
        d = snake_keys(data)
        if "experience" in d:
            d["experience"] = tuple(ExperienceEntry.from_dict(e) for e in d["experience"] or ())
        if "preferences" in d:
            d["preferences"] = JobPreferences.from_dict(d["preferences"] or {})
        if "skills" in d:
            d["skills"] = tuple(str(s) for s in d["skills"] or ())
        for name in ("education", "documents", "badges", "career_highlights"):
            if name in d:
                d[name] = tuple(d[name] or ())
        if "profile_insights" in d:
            d["profile_insights"] = dict(d["profile_insights"] or {})
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
