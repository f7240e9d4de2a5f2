"""Season aggregation.

Reduces each competitor's row of the match grid to a season total, an
average per match and a medal tier.
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

from typing import List, Optional, Sequence

from esportsseason.constants import SEASON_LENGTH
from esportsseason.exceptions import InvalidConfigurationException
from esportsseason.models import Competitor, Medal
from esportsseason.season.models import SeasonRecord
from esportsseason.type_hints import MatchGrid, MatchRow
from esportsseason.utils import setup_logger

logger = setup_logger(__name__)


class SeasonAggregator:
    """Holds season totals, averages and medals per competitor index.

    Malformed grids never raise: missing rows, None rows and None slots all
    count as zero points. Every accessor returns a copy.
    """

    def __init__(
        self, competitors: Sequence[Competitor], season_length: int = SEASON_LENGTH
    ) -> None:
        if season_length < 1:
            raise InvalidConfigurationException(
                f"season_length must be at least 1, got {season_length}"
            )

        self._competitors = tuple(competitors or ())
        self._season_length = season_length
        size = len(self._competitors)
        self._total_points: List[int] = [0] * size
        self._averages: List[float] = [0.0] * size
        self._medals: List[Medal] = [Medal.NONE] * size

    def compute_season_results(self, grid: Optional[MatchGrid]) -> None:
        """Recompute every competitor's season stats from the grid.

        Args:
            grid: Match grid indexed [competitor][slot]; may be None or short
        """
        rows = grid or []
        for index in range(len(self._competitors)):
            row = rows[index] if index < len(rows) else None
            total = self._row_total(row)
            self._total_points[index] = total
            self._averages[index] = total / self._season_length
            self._medals[index] = Medal.from_total_points(total)

        if len(rows) < len(self._competitors):
            logger.warning(
                "Grid has %s rows for %s competitors; missing rows zero-filled",
                len(rows),
                len(self._competitors),
            )

    @staticmethod
    def _row_total(row: Optional[MatchRow]) -> int:
        if not row:
            return 0
        return sum(
            match.match_points
            for match in row
            if match is not None and match.match_points is not None
        )

    def highest_scoring_index(self) -> Optional[int]:
        """Index of the first competitor with the maximal total."""
        if not self._total_points:
            return None

        best_index = 0
        for i in range(1, len(self._total_points)):
            if self._total_points[i] > self._total_points[best_index]:
                best_index = i
        return best_index

    def highest_scoring_competitor(self) -> Optional[Competitor]:
        """Competitor with the maximal total, first one on ties."""
        index = self.highest_scoring_index()
        return None if index is None else self._competitors[index]

    # --- Safe getters ---

    @property
    def season_length(self) -> int:
        return self._season_length

    def get_competitors(self) -> List[Competitor]:
        return list(self._competitors)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._competitors)

    def get_total_points(self, index: int) -> int:
        return self._total_points[index] if self._in_range(index) else 0

    def get_average_per_match(self, index: int) -> float:
        return self._averages[index] if self._in_range(index) else 0.0

    def get_medal(self, index: int) -> Medal:
        return self._medals[index] if self._in_range(index) else Medal.NONE

    def get_all_total_points(self) -> List[int]:
        return list(self._total_points)

    def get_all_averages(self) -> List[float]:
        return list(self._averages)

    def get_all_medals(self) -> List[Medal]:
        return list(self._medals)

    def get_season_record(self, index: int) -> Optional[SeasonRecord]:
        """Season record for one competitor, or None for a bad index."""
        if not self._in_range(index):
            return None
        return SeasonRecord(
            competitor=self._competitors[index],
            total_points=self._total_points[index],
            average_per_match=self._averages[index],
            medal=self._medals[index],
        )

    def get_season_records(self) -> List[SeasonRecord]:
        return [self.get_season_record(i) for i in range(len(self._competitors))]
