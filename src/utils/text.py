from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def snake_case(name: str) -> str:
    """Map a camelCase key like ``salaryRange`` to ``salary_range``."""
    return _CAMEL_BOUNDARY.sub(r"_\1", name).lower()


def snake_keys(data: dict) -> dict:
    return {snake_case(k): v for k, v in data.items()}


def is_blank(text: str) -> bool:
    return not text.strip()
