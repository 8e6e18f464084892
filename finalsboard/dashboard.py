# finalsboard/dashboard.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from finalsboard import config
from finalsboard.api_client import LeaderboardClient, LeaderboardFetchError
from finalsboard.calculator import PlatformAggregator
from finalsboard.models import ALL_PLATFORMS, LeaderboardPage, Player, Statistics

LOGGER = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load data"


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything the dashboard renders, replaced as a whole on every event."""

    loading: bool = True
    error: Optional[str] = None
    list_limit: int = config.DEFAULT_LIST_LIMIT
    players: Mapping[str, Tuple[Player, ...]] = field(default_factory=dict)
    visible: Mapping[str, Tuple[Player, ...]] = field(default_factory=dict)
    statistics: Mapping[str, Statistics] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        platforms = {}
        for platform, stats in self.statistics.items():
            platforms[platform] = {
                "statistics": stats.to_dict(),
                "players": [player.to_dict() for player in self.visible.get(platform, ())],
                "total": len(self.players.get(platform, ())),
            }
        return {
            "loading": self.loading,
            "error": self.error,
            "listLimit": self.list_limit,
            "platforms": platforms,
        }


@dataclass(frozen=True)
class FetchSucceeded:
    pages: Mapping[str, LeaderboardPage]


@dataclass(frozen=True)
class FetchFailed:
    message: str


DashboardEvent = Union[FetchSucceeded, FetchFailed]


def initial_snapshot(list_limit: int = config.DEFAULT_LIST_LIMIT) -> DashboardSnapshot:
    return DashboardSnapshot(loading=True, list_limit=max(1, list_limit))


def _failed(snapshot: DashboardSnapshot, message: str) -> DashboardSnapshot:
    return replace(
        snapshot,
        loading=False,
        error=message,
        players={},
        visible={},
        statistics={},
    )


def reduce(
    snapshot: DashboardSnapshot,
    event: DashboardEvent,
    aggregator: Optional[PlatformAggregator] = None,
) -> DashboardSnapshot:
    """
    Produce the next dashboard snapshot from a fetch-completion event.

    Statistics are only computed once every platform has a leaderboard;
    a failure or an incomplete result clears all platforms together.
    """
    if isinstance(event, FetchFailed):
        return _failed(snapshot, f"{LOAD_ERROR_MESSAGE}: {event.message}")

    missing = [platform for platform in ALL_PLATFORMS if platform not in event.pages]
    if missing:
        return _failed(snapshot, f"{LOAD_ERROR_MESSAGE}: no leaderboard for {', '.join(missing)}")

    aggregator = aggregator or PlatformAggregator()
    players = {platform: tuple(event.pages[platform].players) for platform in ALL_PLATFORMS}
    visible = {platform: rows[:snapshot.list_limit] for platform, rows in players.items()}
    return replace(
        snapshot,
        loading=False,
        error=None,
        players=players,
        visible=visible,
        statistics=aggregator.compute_platform_statistics(players),
    )


async def load_dashboard(
    client: LeaderboardClient,
    list_limit: int = config.DEFAULT_LIST_LIMIT,
) -> DashboardSnapshot:
    """Fetch all platforms and reduce the outcome into a snapshot."""
    snapshot = initial_snapshot(list_limit)
    try:
        pages = await client.fetch_all_platforms(ALL_PLATFORMS)
    except LeaderboardFetchError as exc:
        LOGGER.exception("Error fetching leaderboards")
        return reduce(snapshot, FetchFailed(str(exc)))
    return reduce(snapshot, FetchSucceeded(pages))
