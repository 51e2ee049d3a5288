from __future__ import annotations

import logging
from pathlib import Path

import yaml

from src import config
from src.models.profile import Profile

logger = logging.getLogger(__name__)


def load_seed_profile(path: Path | str | None = None) -> Profile:
    """Read the starting profile from YAML; an empty profile if there is none."""
    seed_path = Path(path) if path is not None else config.SEED_PROFILE_PATH
    if not seed_path.exists():
        logger.info("No seed profile at %s, starting empty", seed_path)
        return Profile()
    with open(seed_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Seed profile must be a mapping, got {type(data).__name__}")
    return Profile.from_dict(data)
