"""Season pipeline: load, simulate, aggregate, query."""

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
from typing import Optional, Sequence

from esportsseason.constants import TITLES_PER_MATCH
from esportsseason.exceptions import InsufficientDataException
from esportsseason.io import read_competitors, read_game_titles
from esportsseason.models import Competitor, GameTitle
from esportsseason.queries import QueryEngine, QueryReport
from esportsseason.season import SeasonAggregator, SeasonConfig, TournamentSimulator
from esportsseason.type_hints import RandomSource
from esportsseason.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class SeasonOutcome:
    """Everything produced by one season run."""

    config: SeasonConfig
    simulator: TournamentSimulator
    aggregator: SeasonAggregator
    report: QueryReport


def check_season_data(
    competitors: Sequence[Competitor], titles: Sequence[GameTitle]
) -> None:
    """Raise InsufficientDataException unless a season can be simulated."""
    if not competitors:
        raise InsufficientDataException("No competitors loaded; the roster is empty")
    if len({title.id for title in titles}) < TITLES_PER_MATCH:
        raise InsufficientDataException(
            f"At least {TITLES_PER_MATCH} different game titles are required "
            f"to run a match, got {len(titles)}"
        )


def simulate(
    config: SeasonConfig,
    competitors: Sequence[Competitor],
    titles: Sequence[GameTitle],
    rng: Optional[RandomSource] = None,
) -> SeasonOutcome:
    """Run simulation, aggregation and queries on already loaded data."""
    config.validate()
    check_season_data(competitors, titles)

    simulator = TournamentSimulator(
        competitors,
        titles,
        season_length=config.season_length,
        rng=rng,
        seed=config.seed,
    )
    simulator.simulate_season()

    grid = simulator.get_results_grid()
    aggregator = SeasonAggregator(competitors, season_length=config.season_length)
    aggregator.compute_season_results(grid)

    report = QueryEngine(grid, competitors, aggregator).run_all()
    logger.info("Season '%s' complete", config.name)
    return SeasonOutcome(
        config=config, simulator=simulator, aggregator=aggregator, report=report
    )


def run_season(
    config: Optional[SeasonConfig] = None, rng: Optional[RandomSource] = None
) -> SeasonOutcome:
    """Load the configured CSV files and run a full season.

    Raises:
        FileLoadException: If an input file cannot be read
        InsufficientDataException: If the roster or title pool is too small
    """
    config = config or SeasonConfig()
    titles = read_game_titles(config.games_path)
    competitors = read_competitors(config.gamers_path)
    return simulate(config, competitors, titles, rng=rng)
