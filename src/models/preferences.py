from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from src.utils.frozen import freeze
from src.utils.text import snake_keys

DEFAULT_NOTIFICATIONS = ("jobs", "status", "messages")


def _default_notifications() -> dict[str, bool]:
    return {name: True for name in DEFAULT_NOTIFICATIONS}


def _unique(items) -> tuple[str, ...]:
    if isinstance(items, tuple) and len(set(items)) == len(items):
        return items
    seen: list[str] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return tuple(seen)


def _parse_toggles(data: dict) -> dict[str, bool]:
    # "false" would be truthy, so only real booleans are accepted
    for name, value in data.items():
        if not isinstance(value, bool):
            raise ValueError(f"Notification {name!r} must be true or false, got {value!r}")
    return dict(data)


@dataclass(frozen=True)
class SalaryRange:
    # Free-form strings: partial entries like "80" are kept while editing
    min: str = ""
    max: str = ""

    @property
    def is_set(self) -> bool:
        return bool(self.min and self.max)

    def to_dict(self) -> dict:
        return {"min": self.min, "max": self.max}

    @classmethod
    def from_dict(cls, data: dict) -> SalaryRange:
        return cls(min=str(data.get("min") or ""), max=str(data.get("max") or ""))


@dataclass(frozen=True)
class JobPreferences:
    location: str = ""
    job_types: tuple[str, ...] = ()  # ["Full-time", "Part-time", "Contract"]
    salary_range: SalaryRange = field(default_factory=SalaryRange)
    notifications: Mapping[str, bool] = field(default_factory=_default_notifications)

    def __post_init__(self):
        object.__setattr__(self, "job_types", _unique(self.job_types))
        object.__setattr__(self, "notifications", freeze(self.notifications))
        if isinstance(self.salary_range, dict):
            object.__setattr__(self, "salary_range", SalaryRange.from_dict(self.salary_range))

    def to_dict(self) -> dict:
        return {
            "location": self.location,
            "job_types": list(self.job_types),
            "salary_range": self.salary_range.to_dict(),
            "notifications": dict(self.notifications),
        }

    @classmethod
    def from_dict(cls, data: dict) -> JobPreferences:
        d = snake_keys(data)
        if "salary_range" in d:
            d["salary_range"] = SalaryRange.from_dict(d["salary_range"] or {})
        if "job_types" in d:
            d["job_types"] = tuple(d["job_types"] or ())
        if "notifications" in d:
            d["notifications"] = _parse_toggles(d["notifications"] or {})
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
