# finalsboard/calculator.py

from collections import Counter
from typing import Dict, Iterable, List, Mapping, Sequence, Union
import logging
import math

from finalsboard.models import ALL_PLATFORMS, CROSSPLAY, LINKABLE_PLATFORMS, Player, Statistics
from finalsboard.ranks import UNAVAILABLE, Availability, label_for

LOGGER = logging.getLogger(__name__)


class PlatformAggregator:
    """Summary statistics over the players of one platform."""

    @staticmethod
    def average_cashouts(players: Sequence[Player]) -> Union[float, Availability]:
        """Mean cashouts, or UNAVAILABLE for an empty sequence."""
        if not players:
            return UNAVAILABLE
        total = math.fsum(player.cashouts for player in players)
        return total / len(players)

    @staticmethod
    def most_common_league(players: Sequence[Player]) -> Union[int, Availability]:
        """
        Most frequent league number.

        Ties go to the league number seen first in input order: the scan
        only replaces the leader on a strictly higher count.
        """
        if not players:
            return UNAVAILABLE

        frequency = Counter(player.league_number for player in players)
        best_league: Union[int, Availability] = UNAVAILABLE
        best_count = 0
        for league_number, count in frequency.items():
            if count > best_count:
                best_count = count
                best_league = league_number
        return best_league

    def most_common_rank(self, players: Sequence[Player]) -> Union[str, Availability]:
        league_number = self.most_common_league(players)
        if league_number is UNAVAILABLE:
            return UNAVAILABLE
        label = label_for(league_number)
        if label is UNAVAILABLE:
            LOGGER.warning("Most common league number %s has no rank label.", league_number)
        return label

    def compute_statistics(self, players: Sequence[Player]) -> Statistics:
        """
        Calculate count, average cashouts and most common rank.

        Args:
            players: Players of a single platform

        Returns:
            Statistics with UNAVAILABLE markers for an empty sequence
        """
        players = tuple(players)
        return Statistics(
            count=len(players),
            average_cashouts=self.average_cashouts(players),
            most_common_rank=self.most_common_rank(players),
        )

    def compute_platform_statistics(
        self, players_by_platform: Mapping[str, Sequence[Player]]
    ) -> Dict[str, Statistics]:
        """Compute statistics for each platform on its own players only."""
        statistics: Dict[str, Statistics] = {}
        for platform, players in players_by_platform.items():
            statistics[platform] = self.compute_statistics(players)
            LOGGER.debug(
                "Computed %s statistics over %d players.",
                platform,
                statistics[platform].count,
            )
        return statistics

    @staticmethod
    def separate_by_linked_platform(players: Iterable[Player]) -> Dict[str, List[Player]]:
        """
        Bucket players by the platforms they have linked accounts on.

        A player linked on several platforms lands in each bucket. The
        crossplay bucket holds records fetched from the crossplay leaderboard.
        """
        buckets: Dict[str, List[Player]] = {platform: [] for platform in ALL_PLATFORMS}
        for player in players:
            for platform in LINKABLE_PLATFORMS:
                if platform in player.linked_platforms:
                    buckets[platform].append(player)
            if player.source_platform == CROSSPLAY:
                buckets[CROSSPLAY].append(player)
        return buckets

    def statistics_by_linked_platform(self, players: Iterable[Player]) -> Dict[str, Statistics]:
        return self.compute_platform_statistics(self.separate_by_linked_platform(players))
