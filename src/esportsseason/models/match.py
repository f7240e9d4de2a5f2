"""Match model: three distinct game titles, each played for 1-10 rounds."""

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

from typing import Any, Dict, Optional, Sequence, Tuple

from esportsseason.constants import MAX_ROUNDS, MIN_ROUNDS, TITLES_PER_MATCH
from esportsseason.exceptions import (
    DuplicateTitleException,
    InvalidMatchShapeException,
    InvalidRoundException,
    MatchException,
    NilCompetitorException,
)
from esportsseason.models.competitor import Competitor
from esportsseason.models.game_title import GameTitle
from esportsseason.scoring import (
    compute_bonus_points,
    compute_raw_points,
    compute_skill_points,
)


class Match:
    """A single match played by one competitor.

    The titles and round counts are fixed at construction. The four score
    fields stay None until :meth:`compute_points_for` runs.

    Attributes:
        id: Positive match identifier
        titles: The 3 titles played, pairwise distinct by id
        rounds: Round count per title, same order as titles
        raw_points: Sum of rounds * base points
        skill_points: Raw points scaled by experience
        bonus_points: Bracket bonus on raw points
        match_points: skill_points + bonus_points
    """

    def __init__(
        self,
        match_id: int,
        titles: Sequence[GameTitle],
        rounds: Sequence[int],
    ) -> None:
        if not isinstance(match_id, int) or isinstance(match_id, bool) or match_id < 1:
            raise MatchException(f"Match id must be a positive int, got {match_id!r}")

        self._id = match_id
        self._titles, self._rounds = self._validate(titles, rounds)

        self._raw_points: Optional[int] = None
        self._skill_points: Optional[int] = None
        self._bonus_points: Optional[int] = None
        self._match_points: Optional[int] = None

    @staticmethod
    def _validate(
        titles: Sequence[GameTitle], rounds: Sequence[int]
    ) -> Tuple[Tuple[GameTitle, ...], Tuple[int, ...]]:
        """Check shape, round range and title distinctness, in that order."""
        if titles is None or rounds is None:
            raise InvalidMatchShapeException("Titles and rounds are required")

        titles = tuple(titles)
        rounds = tuple(rounds)
        if len(titles) != TITLES_PER_MATCH or len(rounds) != TITLES_PER_MATCH:
            raise InvalidMatchShapeException(
                f"A match must have exactly {TITLES_PER_MATCH} titles and "
                f"{TITLES_PER_MATCH} round values, got {len(titles)} and {len(rounds)}"
            )

        for index, title in enumerate(titles):
            if title is None:
                raise InvalidMatchShapeException(f"Title at index {index} is missing")

        for index, value in enumerate(rounds):
            if (
                not isinstance(value, int)
                or isinstance(value, bool)
                or not MIN_ROUNDS <= value <= MAX_ROUNDS
            ):
                raise InvalidRoundException(
                    f"Round count must be in [{MIN_ROUNDS}..{MAX_ROUNDS}], "
                    f"got {value!r} at index {index}"
                )

        ids = [title.id for title in titles]
        if len(set(ids)) != len(ids):
            raise DuplicateTitleException(
                f"Match must contain {TITLES_PER_MATCH} different titles, got ids {ids}"
            )

        return titles, rounds

    # -------- Scoring --------

    def compute_points_for(self, competitor: Competitor) -> None:
        """Score this match for a competitor.

        Calling it again overwrites the previous score.

        Raises:
            NilCompetitorException: If competitor is None
        """
        if competitor is None:
            raise NilCompetitorException("Competitor cannot be None when computing points")

        raw = compute_raw_points(
            self._rounds, [title.base_points_per_round for title in self._titles]
        )
        skill = compute_skill_points(raw, competitor.capped_experience)
        bonus = compute_bonus_points(raw)

        self._raw_points = raw
        self._skill_points = skill
        self._bonus_points = bonus
        self._match_points = skill + bonus

    @property
    def is_scored(self) -> bool:
        return self._match_points is not None

    # -------- Accessors --------

    @property
    def id(self) -> int:
        return self._id

    @property
    def titles(self) -> Tuple[GameTitle, ...]:
        return self._titles

    @property
    def rounds(self) -> Tuple[int, ...]:
        return self._rounds

    @property
    def title_names(self) -> Tuple[str, ...]:
        return tuple(title.name for title in self._titles)

    @property
    def raw_points(self) -> Optional[int]:
        return self._raw_points

    @property
    def skill_points(self) -> Optional[int]:
        return self._skill_points

    @property
    def bonus_points(self) -> Optional[int]:
        return self._bonus_points

    @property
    def match_points(self) -> Optional[int]:
        return self._match_points

    def copy(self) -> "Match":
        """Return an independent copy, score included."""
        clone = Match(self._id, self._titles, self._rounds)
        clone._raw_points = self._raw_points
        clone._skill_points = self._skill_points
        clone._bonus_points = self._bonus_points
        clone._match_points = self._match_points
        return clone

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self._id,
            "titles": [title.to_dict() for title in self._titles],
            "rounds": list(self._rounds),
            "raw_points": self._raw_points,
            "skill_points": self._skill_points,
            "bonus_points": self._bonus_points,
            "match_points": self._match_points,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"Match(id={self._id}, titles={list(self.title_names)}, "
            f"rounds={list(self._rounds)}, match_points={self._match_points})"
        )
