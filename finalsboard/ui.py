# finalsboard/ui.py

from typing import Any, Dict, Iterable

from finalsboard.dashboard import DashboardSnapshot
from finalsboard.models import Player, Statistics
from finalsboard.ranks import UNAVAILABLE


class TerminalUI:
    """Simple terminal-based dashboard."""

    @staticmethod
    def _format_metric(value: Any, decimals: int = 2) -> str:
        if value is None or value is UNAVAILABLE:
            return 'N/A'
        if isinstance(value, float):
            return f'{value:.{decimals}f}'
        return str(value)

    @staticmethod
    def format_player(player: Player) -> str:
        return (
            f"{player.name} - Rank: {player.rank}, League: {player.league}, "
            f"Cashouts: {player.cashouts}"
        )

    def format_statistics(self, stats: Statistics) -> list:
        return [
            f"Total Players Analyzed: {stats.count}",
            f"Average Cashouts: {self._format_metric(stats.average_cashouts)}",
            f"Most Common Rank: {self._format_metric(stats.most_common_rank)}",
        ]

    def show_platform(self, platform: str, stats: Statistics, rows: Iterable[Player]):
        """Display one platform card."""
        print("\n" + "="*50)
        print(platform.upper())
        print("="*50)
        for line in self.format_statistics(stats):
            print(line)
        print("-"*50)
        for player in rows:
            print(self.format_player(player))

    def show_dashboard(self, snapshot: DashboardSnapshot):
        """Display all platforms, or the loading/error message."""
        if snapshot.loading:
            print("Loading statistics...")
            return
        if snapshot.error:
            self.show_error(snapshot.error)
            return
        for platform, stats in snapshot.statistics.items():
            self.show_platform(platform, stats, snapshot.visible.get(platform, ()))

    def show_linked_statistics(self, statistics: Dict[str, Statistics]):
        print("\n" + "="*50)
        print("Statistics by linked account")
        print("="*50)
        for platform, stats in statistics.items():
            print(f"\n{platform.upper()}")
            for line in self.format_statistics(stats):
                print(f"  {line}")

    def show_error(self, message: str):
        """Display error message."""
        print(f"\nERROR: {message}\n")
