"""Season result data structures."""

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

from dataclasses import dataclass
from typing import Any, Dict

from esportsseason.models import Competitor, Medal


@dataclass(frozen=True)
class SeasonRecord:
    """Aggregated season result for one competitor.

    Attributes:
        competitor: The competitor these totals belong to
        total_points: Sum of match points over the season
        average_per_match: total_points divided by the fixed season length
        medal: Tier derived from total_points
    """

    competitor: Competitor
    total_points: int = 0
    average_per_match: float = 0.0
    medal: Medal = Medal.NONE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize season record to dictionary."""
        return {
            "competitor": self.competitor.to_dict(),
            "total_points": self.total_points,
            "average_per_match": self.average_per_match,
            "medal": self.medal.value,
        }
