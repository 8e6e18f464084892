# finalsboard/models.py

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Tuple, Union

from finalsboard.ranks import UNAVAILABLE, Availability

STEAM = "steam"
XBOX = "xbox"
PSN = "psn"
CROSSPLAY = "crossplay"

# Dashboard display order.
ALL_PLATFORMS = (CROSSPLAY, STEAM, PSN, XBOX)

# Platforms a player can link an account on, keyed to the API name field.
LINKABLE_PLATFORMS = {
    STEAM: "steamName",
    XBOX: "xboxName",
    PSN: "psnName",
}


def _safe_int(value: Any, default: int = 0) -> int:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, float) and (not math.isfinite(value) or not value.is_integer()):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _safe_number(value: Any, default: float = 0) -> Union[int, float]:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            return default
        return value
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return number if math.isfinite(number) else default


def _safe_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class Player:
    """One leaderboard entry from a single platform snapshot."""

    rank: int
    change: int
    league_number: int
    league: str
    name: str
    steam_name: str = ""
    xbox_name: str = ""
    psn_name: str = ""
    cashouts: Union[int, float] = 0
    source_platform: str = CROSSPLAY
    linked_platforms: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_api(cls, record: Dict[str, Any], source_platform: str) -> "Player":
        """
        Build a player from one element of the API ``data`` array.

        Missing or malformed fields fall back to neutral values. League
        numbers are kept as-is after integer coercion, so out-of-range tiers
        survive and resolve to UNAVAILABLE when labelled.
        """
        if not isinstance(record, dict):
            record = {}
        names = {platform: _safe_str(record.get(key)) for platform, key in LINKABLE_PLATFORMS.items()}
        linked = frozenset(platform for platform, name in names.items() if name)
        cashouts = _safe_number(record.get("cashouts"))
        return cls(
            rank=_safe_int(record.get("rank")),
            change=_safe_int(record.get("change")),
            league_number=_safe_int(record.get("leagueNumber")),
            league=_safe_str(record.get("league")),
            name=_safe_str(record.get("name")),
            steam_name=names[STEAM],
            xbox_name=names[XBOX],
            psn_name=names[PSN],
            cashouts=cashouts if cashouts >= 0 else 0,
            source_platform=source_platform,
            linked_platforms=linked,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "change": self.change,
            "leagueNumber": self.league_number,
            "league": self.league,
            "name": self.name,
            "steamName": self.steam_name,
            "xboxName": self.xbox_name,
            "psnName": self.psn_name,
            "cashouts": self.cashouts,
            "sourcePlatform": self.source_platform,
            "linkedPlatforms": sorted(self.linked_platforms),
        }


@dataclass(frozen=True)
class LeaderboardMeta:
    leaderboard_version: str = ""
    leaderboard_platform: str = ""
    return_raw_data: bool = False
    return_count_only: bool = False

    @classmethod
    def from_api(cls, meta: Any) -> "LeaderboardMeta":
        if not isinstance(meta, dict):
            return cls()
        return cls(
            leaderboard_version=_safe_str(meta.get("leaderboardVersion")),
            leaderboard_platform=_safe_str(meta.get("leaderboardPlatform")),
            return_raw_data=bool(meta.get("returnRawData")),
            return_count_only=bool(meta.get("returnCountOnly")),
        )


@dataclass(frozen=True)
class LeaderboardPage:
    """Parsed response of one platform endpoint."""

    platform: str
    meta: LeaderboardMeta
    count: int
    players: Tuple[Player, ...]


@dataclass(frozen=True)
class Statistics:
    count: int
    average_cashouts: Union[float, Availability] = UNAVAILABLE
    most_common_rank: Union[str, Availability] = UNAVAILABLE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "averageCashouts": None if self.average_cashouts is UNAVAILABLE else self.average_cashouts,
            "mostCommonRank": None if self.most_common_rank is UNAVAILABLE else self.most_common_rank,
        }
