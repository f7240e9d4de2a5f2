"""GameTitle data class."""

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
from typing import Any, Dict

from esportsseason.exceptions import InvalidGameTitleException
from esportsseason.utils.validation import (
    validate_non_empty,
    validate_non_negative_integer,
)


@dataclass(frozen=True)
class GameTitle:
    """A game title that can be drawn into a match.

    Attributes
    ----------
    id : int
        Non-negative identifier; equality and hashing use the id only.
    name : str
        Display name, trimmed, never empty.
    base_points_per_round : int
        Non-negative points awarded per round played.
    """

    id: int
    name: str = field(compare=False)
    base_points_per_round: int = field(compare=False)

    def __post_init__(self) -> None:
        for value, field_name in (
            (self.id, "Game id"),
            (self.base_points_per_round, "Base points per round"),
        ):
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidGameTitleException(f"{field_name} must be an int: {value!r}")
            result = validate_non_negative_integer(value, field_name)
            if not result:
                raise InvalidGameTitleException(result.error_message)

        name = validate_non_empty(self.name, "Game name")
        if not name:
            raise InvalidGameTitleException(name.error_message)
        object.__setattr__(self, "name", name.sanitized_value)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize game title to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "base_points_per_round": self.base_points_per_round,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameTitle":
        """Deserialize game title from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            base_points_per_round=data["base_points_per_round"],
        )

    def __str__(self) -> str:
        return self.name
