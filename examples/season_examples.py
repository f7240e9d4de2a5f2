"""Example script demonstrating programmatic use of the season engine.

Shows a seeded season from the bundled CSV files, and a season built from
in-memory data with a custom random source.
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

import random
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from esportsseason.app import run_season, simulate
from esportsseason.models import Competitor, GameTitle
from esportsseason.reporting import render_query, render_standings
from esportsseason.season import SeasonConfig


class LowRollRandom(random.Random):
    """Random source that always plays the minimum number of rounds."""

    def randint(self, a, b):
        return a


def example_1_bundled_season():
    """Run a seeded season on the bundled data and print the standings."""
    print("=" * 70)
    print("EXAMPLE 1: Seeded season from bundled CSV files")
    print("=" * 70)

    outcome = run_season(SeasonConfig(name="Example Cup", seed=2025))
    print(render_standings(outcome.aggregator.get_season_records()))
    print()
    print(render_query(outcome.report, 6))


def example_2_in_memory_season():
    """Simulate a small season without any files."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: In-memory data with a custom random source")
    print("=" * 70)

    titles = [
        GameTitle(id=1, name="Valorant", base_points_per_round=12),
        GameTitle(id=2, name="Rocket League", base_points_per_round=9),
        GameTitle(id=3, name="Dota 2", base_points_per_round=16),
    ]
    competitors = [
        Competitor(id=1, nickname="Shadow", real_name="Liam Carter", experience_years=4),
        Competitor(id=2, nickname="Blaze", real_name="Ava Martinez", experience_years=12),
    ]

    outcome = simulate(
        SeasonConfig(name="Low Roll Open", season_length=5),
        competitors,
        titles,
        rng=LowRollRandom(7),
    )
    print(render_query(outcome.report, 1))
    print()
    print(render_query(outcome.report, 5))


if __name__ == "__main__":
    example_1_bundled_season()
    example_2_in_memory_season()
