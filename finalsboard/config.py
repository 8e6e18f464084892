# finalsboard/config.py

import os
from typing import Optional

API_BASE = os.environ.get(
    "FINALSBOARD_API_BASE",
    "https://api.the-finals-leaderboard.com/v1/leaderboard",
).rstrip("/")
SEASON = os.environ.get("FINALSBOARD_SEASON", "season2")

# Rows shown per platform list; statistics always use the full leaderboard.
DEFAULT_LIST_LIMIT = 100
MAX_LIST_LIMIT = 1000


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str) -> Optional[float]:
    raw = os.environ.get(name)
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


LIST_LIMIT = max(1, min(_env_int("FINALSBOARD_LIST_LIMIT", DEFAULT_LIST_LIMIT), MAX_LIST_LIMIT))

# None means requests wait indefinitely.
TIMEOUT_SECONDS = _env_float("FINALSBOARD_TIMEOUT_SECONDS")
