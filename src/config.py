from __future__ import annotations

import os
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

SEED_PROFILE_PATH = Path(os.environ.get("PROFILE_SEED_PATH", DATA_DIR / "seed_profile.yaml"))

LOG_LEVEL = os.environ.get("PROFILE_LOG_LEVEL", "INFO")
