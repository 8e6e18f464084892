# finalsboard/ranks.py

from enum import Enum
from typing import Any, Dict, Union


class Availability(Enum):
    UNAVAILABLE = "unavailable"

    def __repr__(self) -> str:
        return "UNAVAILABLE"


# Explicit "no data" marker, distinct from 0 and from an empty string.
UNAVAILABLE = Availability.UNAVAILABLE

TIERS = ("Bronze", "Silver", "Gold", "Platinum", "Diamond")
SUB_LEVELS = ("IV", "III", "II", "I")

MIN_LEAGUE = 1
MAX_LEAGUE = len(TIERS) * len(SUB_LEVELS)

RANK_LABELS: Dict[int, str] = {
    tier_index * len(SUB_LEVELS) + level_index + 1: f"{tier} {level}"
    for tier_index, tier in enumerate(TIERS)
    for level_index, level in enumerate(SUB_LEVELS)
}


def label_for(league_number: Any) -> Union[str, Availability]:
    """Return the rank label for a league number (1 = Bronze IV, 20 = Diamond I)."""
    if isinstance(league_number, bool) or not isinstance(league_number, int):
        return UNAVAILABLE
    return RANK_LABELS.get(league_number, UNAVAILABLE)
