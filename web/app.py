from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
import asyncio
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from finalsboard import config
from finalsboard.api_client import LeaderboardClient, LeaderboardFetchError
from finalsboard.calculator import PlatformAggregator
from finalsboard.dashboard import load_dashboard
from finalsboard.models import ALL_PLATFORMS

logger = logging.getLogger(__name__)

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
static_dir = os.path.join(project_root, "web", "static")

app = FastAPI(title="THE FINALS Player Statistics")
app.mount("/static", StaticFiles(directory=static_dir), name="static")

api_client = LeaderboardClient()
aggregator = PlatformAggregator()


def _clamp_limit(limit: int) -> int:
    return max(1, min(limit, config.MAX_LIST_LIMIT))


@app.get("/")
async def root() -> HTMLResponse:
    with open(os.path.join(static_dir, "index.html"), encoding="utf-8") as f:
        return HTMLResponse(
            content=f.read(),
            headers={
                "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
                "Pragma": "no-cache",
                "Expires": "0",
            },
        )


@app.get("/api/platforms")
async def platforms() -> dict:
    return {
        "season": api_client.season,
        "platforms": [
            {"platform": platform, "url": api_client.platform_url(platform)}
            for platform in ALL_PLATFORMS
        ],
    }


@app.get("/api/stats")
async def stats(limit: int = config.LIST_LIMIT) -> dict:
    snapshot = await load_dashboard(api_client, list_limit=_clamp_limit(limit))
    if snapshot.error:
        raise HTTPException(status_code=502, detail=snapshot.error)
    return snapshot.to_dict()


@app.get("/api/leaderboard/{platform}")
async def leaderboard(platform: str, limit: int = config.LIST_LIMIT) -> dict:
    if platform not in ALL_PLATFORMS:
        raise HTTPException(status_code=404, detail=f"Unknown platform: {platform}")
    try:
        page = await asyncio.to_thread(api_client.fetch_platform, platform)
    except LeaderboardFetchError as e:
        logger.error("Error fetching %s leaderboard: %s", platform, e)
        raise HTTPException(status_code=502, detail=f"Failed to load data: {str(e)}")

    rows = page.players[:_clamp_limit(limit)]
    return {
        "platform": platform,
        "count": page.count,
        "leaderboardVersion": page.meta.leaderboard_version,
        "statistics": aggregator.compute_statistics(page.players).to_dict(),
        "players": [player.to_dict() for player in rows],
    }


@app.get("/api/linked-stats")
async def linked_stats() -> dict:
    snapshot = await load_dashboard(api_client)
    if snapshot.error:
        raise HTTPException(status_code=502, detail=snapshot.error)

    players = [player for rows in snapshot.players.values() for player in rows]
    statistics = aggregator.statistics_by_linked_platform(players)
    return {
        "platforms": {platform: stats.to_dict() for platform, stats in statistics.items()},
    }
