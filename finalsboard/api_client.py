# finalsboard/api_client.py

from __future__ import annotations

import asyncio
import http.client
import json
import logging
from typing import Any, Dict, Iterable, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from finalsboard import config
from finalsboard.models import ALL_PLATFORMS, LeaderboardMeta, LeaderboardPage, Player

LOGGER = logging.getLogger(__name__)


class LeaderboardFetchError(Exception):
    """Raised when a leaderboard endpoint cannot be loaded."""


class LeaderboardClient:
    HEADERS = {
        "User-Agent": "finalsboard/0.3 (+https://the-finals-leaderboard.com)",
        "Accept": "application/json",
    }

    def __init__(
        self,
        base_url: str = config.API_BASE,
        season: str = config.SEASON,
        timeout_seconds: Optional[float] = config.TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self.season = season
        self.timeout_seconds = timeout_seconds

    def platform_url(self, platform: str) -> str:
        if platform not in ALL_PLATFORMS:
            raise ValueError(f"Unknown platform: {platform!r}")
        return f"{self.base_url}/{self.season}/{platform}"

    def _get_json(self, url: str) -> Dict[str, Any]:
        req = Request(url, headers=self.HEADERS, method="GET")
        kwargs = {} if self.timeout_seconds is None else {"timeout": self.timeout_seconds}
        try:
            with urlopen(req, **kwargs) as resp:
                status = getattr(resp, "status", 200)
                if not 200 <= status < 300:
                    raise LeaderboardFetchError(f"Failed to fetch from {url}: HTTP {status}")
                body = resp.read()
        except HTTPError as exc:
            raise LeaderboardFetchError(f"Failed to fetch from {url}: HTTP {exc.code}") from exc
        except URLError as exc:
            raise LeaderboardFetchError(f"Failed to fetch from {url}: {exc.reason}") from exc
        except (OSError, http.client.HTTPException) as exc:
            raise LeaderboardFetchError(f"Failed to fetch from {url}: {exc}") from exc

        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise LeaderboardFetchError(f"Invalid JSON from {url}") from exc

    def parse_leaderboard(self, payload: Any, platform: str) -> LeaderboardPage:
        """Parse a ``{meta, count, data}`` response into a LeaderboardPage."""
        if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
            raise LeaderboardFetchError(f"Malformed {platform} leaderboard: missing data array")

        players = tuple(Player.from_api(record, platform) for record in payload["data"])
        count = payload.get("count")
        if isinstance(count, bool) or not isinstance(count, int):
            count = len(players)
        return LeaderboardPage(
            platform=platform,
            meta=LeaderboardMeta.from_api(payload.get("meta")),
            count=count,
            players=players,
        )

    def fetch_platform(self, platform: str) -> LeaderboardPage:
        url = self.platform_url(platform)
        LOGGER.debug("Fetching %s leaderboard from %s", platform, url)
        page = self.parse_leaderboard(self._get_json(url), platform)
        LOGGER.info("Fetched %d %s players", len(page.players), platform)
        return page

    async def fetch_all_platforms(
        self, platforms: Iterable[str] = ALL_PLATFORMS
    ) -> Dict[str, LeaderboardPage]:
        """
        Fetch every platform concurrently and join on all of them.

        The join is all-or-nothing: if any request fails the whole call
        raises LeaderboardFetchError and no partial result is returned.
        """
        platforms = tuple(platforms)
        for platform in platforms:
            self.platform_url(platform)

        results = await asyncio.gather(
            *(asyncio.to_thread(self.fetch_platform, platform) for platform in platforms)
        )
        return dict(zip(platforms, results))
