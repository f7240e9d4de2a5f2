"""Season simulation.

Generates a fixed number of random matches for every competitor and scores
each one as soon as it is created.
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
from typing import List, Optional, Sequence, Tuple

from esportsseason.constants import (
    MAX_ROUNDS,
    MIN_ROUNDS,
    SEASON_LENGTH,
    TITLES_PER_MATCH,
)
from esportsseason.exceptions import (
    InsufficientDataException,
    InvalidConfigurationException,
)
from esportsseason.models import Competitor, GameTitle, Match
from esportsseason.type_hints import MatchGrid, RandomSource
from esportsseason.utils import setup_logger

logger = setup_logger(__name__)


class TournamentSimulator:
    """Owns the match grid and the random source for one season.

    The grid is indexed ``[competitor index][match slot]``. Match ids are
    issued from a counter that starts at 1 and never goes back, so every
    match in the season has a unique id.

    Random draws happen in a fixed order (competitors ascending, slots
    ascending, and within a match title then round count per position), so a
    seeded source reproduces the same season.

    Title selection uses rejection sampling: a drawn title whose id is
    already in the match is discarded and redrawn. This needs only a couple
    of extra draws for realistic pools; with exactly 3 titles the last slot
    succeeds with probability 1/3 per draw, which is slow but still
    terminates almost surely.
    """

    def __init__(
        self,
        competitors: Sequence[Competitor],
        titles: Sequence[GameTitle],
        season_length: int = SEASON_LENGTH,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the simulator.

        Args:
            competitors: Roster, in the order rows appear in the grid
            titles: Pool of titles to draw from
            season_length: Matches per competitor
            rng: Random source; takes precedence over seed
            seed: Seed for a fresh random.Random when rng is not given
        """
        if season_length < 1:
            raise InvalidConfigurationException(
                f"season_length must be at least 1, got {season_length}"
            )

        self._season_length = season_length
        self._competitors: Tuple[Competitor, ...] = tuple(competitors or ())
        self._titles: Tuple[GameTitle, ...] = tuple(titles or ())
        self._random: RandomSource = rng if rng is not None else random.Random(seed)
        self._next_match_id = 1

        distinct_ids = {title.id for title in self._titles}
        self._can_simulate = (
            bool(self._competitors) and len(distinct_ids) >= TITLES_PER_MATCH
        )

        if self._can_simulate:
            self._grid: MatchGrid = [
                [None] * season_length for _ in self._competitors
            ]
        else:
            logger.warning(
                "Simulation disabled: %s competitors, %s distinct titles "
                "(need at least 1 and %s)",
                len(self._competitors),
                len(distinct_ids),
                TITLES_PER_MATCH,
            )
            self._grid = []

    # -------- Simulation --------

    def generate_match(self, match_id: int) -> Match:
        """Build one unscored match from random draws.

        Args:
            match_id: Id for the new match

        Returns:
            A valid match with 3 distinct titles and round counts in range
        """
        if len({title.id for title in self._titles}) < TITLES_PER_MATCH:
            raise InsufficientDataException(
                f"Need at least {TITLES_PER_MATCH} distinct titles to build a match"
            )

        selected: List[GameTitle] = []
        rounds: List[int] = []
        used_ids = set()

        while len(selected) < TITLES_PER_MATCH:
            candidate = self._titles[self._random.randrange(len(self._titles))]
            if candidate.id in used_ids:
                continue
            used_ids.add(candidate.id)
            selected.append(candidate)
            rounds.append(self._random.randint(MIN_ROUNDS, MAX_ROUNDS))

        return Match(match_id, selected, rounds)

    def simulate_season(self) -> None:
        """Generate and score every match of the season.

        Does nothing when the roster is empty or the title pool is too small.
        Calling it again replaces the grid with a new season.
        """
        if not self._can_simulate:
            logger.warning("simulate_season skipped: insufficient roster or title pool")
            return

        first_id = self._next_match_id
        for row_index, competitor in enumerate(self._competitors):
            row = self._grid[row_index]
            for slot in range(self._season_length):
                match = self.generate_match(self._next_match_id)
                self._next_match_id += 1
                match.compute_points_for(competitor)
                row[slot] = match

        logger.info(
            "Simulated %s matches for %s competitors (ids %s-%s)",
            self._next_match_id - first_id,
            len(self._competitors),
            first_id,
            self._next_match_id - 1,
        )

    # -------- Accessors --------

    def get_results_grid(self) -> MatchGrid:
        """Return an independent copy of the match grid."""
        return [
            [match.copy() if match is not None else None for match in row]
            for row in self._grid
        ]

    @property
    def can_simulate(self) -> bool:
        return self._can_simulate

    @property
    def season_length(self) -> int:
        return self._season_length

    @property
    def next_match_id(self) -> int:
        return self._next_match_id

    @property
    def number_of_competitors(self) -> int:
        return len(self._competitors)

    @property
    def competitors(self) -> Tuple[Competitor, ...]:
        return self._competitors

    @property
    def titles(self) -> Tuple[GameTitle, ...]:
        return self._titles
