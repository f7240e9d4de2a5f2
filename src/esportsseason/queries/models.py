"""Result records returned by the query engine."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from esportsseason.models import Match, Medal


@dataclass(frozen=True)
class MatchSummary:
    """Flattened view of one scored match."""

    match_id: int
    title_names: Tuple[str, ...]
    rounds: Tuple[int, ...]
    raw_points: int
    skill_points: int
    bonus_points: int
    match_points: int

    @classmethod
    def from_match(cls, match: Match) -> "MatchSummary":
        return cls(
            match_id=match.id,
            title_names=match.title_names,
            rounds=match.rounds,
            raw_points=match.raw_points,
            skill_points=match.skill_points,
            bonus_points=match.bonus_points,
            match_points=match.match_points,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "match_id": self.match_id,
            "title_names": list(self.title_names),
            "rounds": list(self.rounds),
            "raw_points": self.raw_points,
            "skill_points": self.skill_points,
            "bonus_points": self.bonus_points,
            "match_points": self.match_points,
        }


@dataclass(frozen=True)
class LowestMatchResult:
    """Lowest-scoring match and the title that contributed most to it."""

    match: MatchSummary
    top_title_name: str
    top_title_rounds: int
    top_title_base_points: int
    contribution: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "match": self.match.to_dict(),
            "top_title_name": self.top_title_name,
            "top_title_rounds": self.top_title_rounds,
            "top_title_base_points": self.top_title_base_points,
            "contribution": self.contribution,
        }


@dataclass(frozen=True)
class TopCompetitorResult:
    """Season line of the highest-scoring competitor."""

    nickname: str
    real_name: str
    total_points: int
    average_per_match: float
    medal: Medal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nickname": self.nickname,
            "real_name": self.real_name,
            "total_points": self.total_points,
            "average_per_match": self.average_per_match,
            "medal": self.medal.value,
        }


@dataclass(frozen=True)
class TournamentTotals:
    """Tournament-wide point sum, computed two ways.

    Attributes:
        total_points: Sum of every competitor's season total
        grid_points: Sum of match points over every grid cell
        match_count: Number of scored matches in the grid
    """

    total_points: int
    grid_points: int
    match_count: int

    @property
    def is_consistent(self) -> bool:
        return self.total_points == self.grid_points

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_points": self.total_points,
            "grid_points": self.grid_points,
            "match_count": self.match_count,
        }


@dataclass(frozen=True)
class MedalShare:
    """Count and percentage of the roster holding one medal tier."""

    medal: Medal
    count: int
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "medal": self.medal.value,
            "count": self.count,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class MedalDistribution:
    """Per-tier medal counts, in GOLD, SILVER, BRONZE, NONE order.

    Percentages are rounded independently, so their sum may be off 100 by a
    few tenths.
    """

    roster_size: int
    shares: Tuple[MedalShare, ...]

    def share_for(self, medal: Medal) -> MedalShare:
        for share in self.shares:
            if share.medal is medal:
                return share
        raise KeyError(medal)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roster_size": self.roster_size,
            "shares": [share.to_dict() for share in self.shares],
        }


@dataclass
class QueryReport:
    """All six query results; None marks a query with no data."""

    highest_scoring_match: Optional[MatchSummary] = None
    lowest_scoring_match: Optional[LowestMatchResult] = None
    lowest_bonus_match: Optional[MatchSummary] = None
    highest_scoring_competitor: Optional[TopCompetitorResult] = None
    total_tournament_points: Optional[TournamentTotals] = None
    medal_distribution: Optional[MedalDistribution] = None
    season_length: int = field(default=0)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize report to dictionary."""

        def dump(result):
            return None if result is None else result.to_dict()

        return {
            "season_length": self.season_length,
            "highest_scoring_match": dump(self.highest_scoring_match),
            "lowest_scoring_match": dump(self.lowest_scoring_match),
            "lowest_bonus_match": dump(self.lowest_bonus_match),
            "highest_scoring_competitor": dump(self.highest_scoring_competitor),
            "total_tournament_points": dump(self.total_tournament_points),
            "medal_distribution": dump(self.medal_distribution),
        }
