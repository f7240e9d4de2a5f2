"""Enumerations used by the season models."""

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

from enum import Enum

from esportsseason.constants import (
    BRONZE_THRESHOLD,
    GOLD_THRESHOLD,
    SILVER_THRESHOLD,
)


class Medal(Enum):
    """Medal tier awarded for a season total."""

    GOLD = "GOLD"
    SILVER = "SILVER"
    BRONZE = "BRONZE"
    NONE = "NONE"

    @classmethod
    def from_total_points(cls, total_points: int) -> "Medal":
        """Classify a season total into a medal tier."""
        if total_points >= GOLD_THRESHOLD:
            return cls.GOLD
        if total_points >= SILVER_THRESHOLD:
            return cls.SILVER
        if total_points >= BRONZE_THRESHOLD:
            return cls.BRONZE
        return cls.NONE

    @property
    def display_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
