# main.py

import argparse
import asyncio
import json
import logging

from finalsboard import config
from finalsboard.api_client import LeaderboardClient
from finalsboard.calculator import PlatformAggregator
from finalsboard.dashboard import DashboardSnapshot, load_dashboard
from finalsboard.ui import TerminalUI


def _safe_print(message: str) -> None:
    """Print with a fallback for restricted terminal encodings."""
    try:
        print(message)
    except UnicodeEncodeError:
        print(message.encode("ascii", "replace").decode("ascii"))


def _linked_statistics(snapshot: DashboardSnapshot) -> dict:
    players = [player for rows in snapshot.players.values() for player in rows]
    return PlatformAggregator().statistics_by_linked_platform(players)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="THE FINALS leaderboard statistics")
    parser.add_argument(
        "--limit",
        type=int,
        default=config.LIST_LIMIT,
        help=f"Players listed per platform (default: {config.LIST_LIMIT})",
    )
    parser.add_argument("--season", default=config.SEASON, help="Leaderboard season, e.g. season2")
    parser.add_argument("--json", action="store_true", help="Print the dashboard as JSON")
    parser.add_argument(
        "--by-linked-account",
        action="store_true",
        help="Also group players by the platforms they have linked accounts on",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    limit = max(1, min(args.limit, config.MAX_LIST_LIMIT))
    client = LeaderboardClient(season=args.season)
    snapshot = asyncio.run(load_dashboard(client, list_limit=limit))

    if args.json:
        payload = snapshot.to_dict()
        if args.by_linked_account and not snapshot.error:
            payload["linkedAccounts"] = {
                platform: stats.to_dict() for platform, stats in _linked_statistics(snapshot).items()
            }
        _safe_print(json.dumps(payload, indent=2))
    else:
        ui = TerminalUI()
        ui.show_dashboard(snapshot)
        if args.by_linked_account and not snapshot.error:
            ui.show_linked_statistics(_linked_statistics(snapshot))

    return 1 if snapshot.error else 0


if __name__ == '__main__':
    raise SystemExit(main())
