"""The six season queries.

All queries are read-only scans over the match grid and the aggregated
season totals. Scans run competitor by competitor, slot by slot, and the
first match found wins any tie.
"""

# Esports Season
# Copyright (C) 2025  Esports Season developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterator, Optional, Sequence

from esportsseason.models import Competitor, Match, Medal
from esportsseason.queries.models import (
    LowestMatchResult,
    MatchSummary,
    MedalDistribution,
    MedalShare,
    QueryReport,
    TopCompetitorResult,
    TournamentTotals,
)
from esportsseason.scoring import title_contribution
from esportsseason.season.aggregator import SeasonAggregator
from esportsseason.type_hints import MatchGrid
from esportsseason.utils import setup_logger

logger = setup_logger(__name__)

MEDAL_ORDER = (Medal.GOLD, Medal.SILVER, Medal.BRONZE, Medal.NONE)


def _percentage(count: int, total: int) -> float:
    """Percentage to one decimal, with halves rounded away from zero."""
    exact = Decimal(count * 100) / Decimal(total)
    return float(exact.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class QueryEngine:
    """Answers the fixed season questions.

    Every query returns None when there is nothing to report: an empty
    roster, or a grid with no scored matches.
    """

    def __init__(
        self,
        grid: Optional[MatchGrid],
        competitors: Sequence[Competitor],
        aggregator: SeasonAggregator,
    ) -> None:
        self._grid = grid or []
        self._competitors = tuple(competitors or ())
        self._aggregator = aggregator

    # -------- Scanning helpers --------

    def _scored_matches(self) -> Iterator[Match]:
        for row in self._grid:
            if not row:
                continue
            for match in row:
                if match is not None and match.is_scored:
                    yield match

    def has_data(self) -> bool:
        """Whether there is a roster and at least one scored match."""
        if not self._competitors:
            return False
        return next(self._scored_matches(), None) is not None

    def _scan(self, key: Callable[[Match], int], lowest: bool) -> Optional[Match]:
        """Find the extreme match by key; strict comparison keeps the first."""
        best = None
        best_value = None
        for match in self._scored_matches():
            value = key(match)
            if (
                best is None
                or (lowest and value < best_value)
                or (not lowest and value > best_value)
            ):
                best, best_value = match, value
        return best

    # -------- Query 1 --------

    def highest_scoring_match(self) -> Optional[MatchSummary]:
        """Match with the most match points."""
        if not self.has_data():
            return None
        match = self._scan(lambda m: m.match_points, lowest=False)
        return MatchSummary.from_match(match)

    # -------- Query 2 --------

    def lowest_scoring_match(self) -> Optional[LowestMatchResult]:
        """Match with the fewest match points and its top contributing title."""
        if not self.has_data():
            return None
        match = self._scan(lambda m: m.match_points, lowest=True)

        best_index = 0
        best_contribution = -1
        for i, (title, rounds) in enumerate(zip(match.titles, match.rounds)):
            contribution = title_contribution(rounds, title.base_points_per_round)
            if contribution > best_contribution:
                best_index, best_contribution = i, contribution

        top_title = match.titles[best_index]
        return LowestMatchResult(
            match=MatchSummary.from_match(match),
            top_title_name=top_title.name,
            top_title_rounds=match.rounds[best_index],
            top_title_base_points=top_title.base_points_per_round,
            contribution=best_contribution,
        )

    # -------- Query 3 --------

    def lowest_bonus_match(self) -> Optional[MatchSummary]:
        """Match that awarded the fewest bonus points."""
        if not self.has_data():
            return None
        match = self._scan(lambda m: m.bonus_points, lowest=True)
        return MatchSummary.from_match(match)

    # -------- Query 4 --------

    def highest_scoring_competitor(self) -> Optional[TopCompetitorResult]:
        """Season line of the competitor with the highest total."""
        if not self.has_data():
            return None

        index = self._aggregator.highest_scoring_index()
        if index is None:
            return None
        competitor = (
            self._competitors[index]
            if index < len(self._competitors)
            else self._aggregator.get_competitors()[index]
        )
        return TopCompetitorResult(
            nickname=competitor.nickname,
            real_name=competitor.real_name,
            total_points=self._aggregator.get_total_points(index),
            average_per_match=self._aggregator.get_average_per_match(index),
            medal=self._aggregator.get_medal(index),
        )

    # -------- Query 5 --------

    def total_tournament_points(self) -> Optional[TournamentTotals]:
        """Sum of all season totals, cross-checked against the grid."""
        if not self.has_data():
            return None

        grid_points = 0
        match_count = 0
        for match in self._scored_matches():
            grid_points += match.match_points
            match_count += 1

        totals = TournamentTotals(
            total_points=sum(self._aggregator.get_all_total_points()),
            grid_points=grid_points,
            match_count=match_count,
        )
        if not totals.is_consistent:
            logger.warning(
                "Season totals (%s) differ from grid sum (%s)",
                totals.total_points,
                totals.grid_points,
            )
        return totals

    # -------- Query 6 --------

    def medal_distribution(self) -> Optional[MedalDistribution]:
        """Count and percentage of competitors per medal tier."""
        if not self.has_data():
            return None

        medals = self._aggregator.get_all_medals()
        roster_size = len(medals)
        if roster_size == 0:
            return None

        shares = []
        for medal in MEDAL_ORDER:
            count = sum(1 for m in medals if m is medal)
            shares.append(
                MedalShare(
                    medal=medal,
                    count=count,
                    percentage=_percentage(count, roster_size),
                )
            )
        return MedalDistribution(roster_size=roster_size, shares=tuple(shares))

    # -------- All queries --------

    def run_all(self) -> QueryReport:
        """Run the six queries in report order."""
        if not self.has_data():
            logger.info("No season data available; all queries report no data")

        return QueryReport(
            highest_scoring_match=self.highest_scoring_match(),
            lowest_scoring_match=self.lowest_scoring_match(),
            lowest_bonus_match=self.lowest_bonus_match(),
            highest_scoring_competitor=self.highest_scoring_competitor(),
            total_tournament_points=self.total_tournament_points(),
            medal_distribution=self.medal_distribution(),
            season_length=self._aggregator.season_length,
        )
