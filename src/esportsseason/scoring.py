"""Point computation for a single match.

A match's score is built in four steps:

1. raw points: sum of ``rounds * base points per round`` over its titles
2. skill points: raw points scaled by an experience multiplier, truncated
3. bonus points: a step function of the raw points
4. match points: skill + bonus
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

import math
from typing import Sequence

from esportsseason.constants import (
    BASE_BONUS,
    BONUS_TIERS,
    EXPERIENCE_CAP,
    EXPERIENCE_STEP,
)


def title_contribution(rounds: int, base_points_per_round: int) -> int:
    """Raw points one title adds to a match."""
    return rounds * base_points_per_round


def compute_raw_points(
    rounds: Sequence[int], base_points: Sequence[int]
) -> int:
    """Sum the per-title contributions of a match.

    Args:
        rounds: Round count per title
        base_points: Base points per round per title, same order as rounds

    Returns:
        Raw points of the match
    """
    return sum(title_contribution(r, b) for r, b in zip(rounds, base_points))


def skill_multiplier(experience_years: int) -> float:
    """Experience multiplier, capped at EXPERIENCE_CAP years."""
    return 1.0 + min(experience_years, EXPERIENCE_CAP) * EXPERIENCE_STEP


def compute_skill_points(raw_points: int, experience_years: int) -> int:
    """Scale raw points by the experience multiplier and truncate."""
    return int(math.floor(raw_points * skill_multiplier(experience_years)))


def compute_bonus_points(raw_points: int) -> int:
    """Look up the bonus bracket for a raw score."""
    for threshold, bonus in BONUS_TIERS:
        if raw_points >= threshold:
            return bonus
    return BASE_BONUS
