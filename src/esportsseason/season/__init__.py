"""Season simulation and aggregation."""

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

from esportsseason.season.aggregator import SeasonAggregator
from esportsseason.season.config import SeasonConfig
from esportsseason.season.models import SeasonRecord
from esportsseason.season.simulator import TournamentSimulator

__all__ = [
    "SeasonAggregator",
    "SeasonConfig",
    "SeasonRecord",
    "TournamentSimulator",
]
