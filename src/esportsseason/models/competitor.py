"""Competitor data class."""

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

from esportsseason.constants import EXPERIENCE_CAP
from esportsseason.exceptions import InvalidCompetitorException
from esportsseason.utils.validation import (
    validate_experience,
    validate_non_empty,
    validate_non_negative_integer,
    validate_phone,
)


@dataclass(frozen=True)
class Competitor:
    """A registered competitor.

    Attributes
    ----------
    id : int
        Non-negative identifier.
    nickname : str
        In-game handle, trimmed, never empty.
    real_name : str
        Legal name, trimmed, never empty.
    phone : str
        Contact number; may be empty.
    experience_years : int
        Years of competitive experience. Negative input is clamped to 0.
    """

    id: int
    nickname: str
    real_name: str
    phone: str = ""
    experience_years: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise InvalidCompetitorException(f"Competitor id must be an int: {self.id!r}")
        result = validate_non_negative_integer(self.id, "Competitor id")
        if not result:
            raise InvalidCompetitorException(result.error_message)

        for attr, label in (("nickname", "Nickname"), ("real_name", "Real name")):
            result = validate_non_empty(getattr(self, attr), label)
            if not result:
                raise InvalidCompetitorException(result.error_message)
            object.__setattr__(self, attr, result.sanitized_value)

        object.__setattr__(self, "phone", validate_phone(self.phone).sanitized_value)

        result = validate_experience(self.experience_years)
        if not result:
            raise InvalidCompetitorException(result.error_message)
        object.__setattr__(self, "experience_years", result.sanitized_value)

    @property
    def capped_experience(self) -> int:
        """Experience years as used for scoring."""
        return min(self.experience_years, EXPERIENCE_CAP)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize competitor to dictionary."""
        return {
            "id": self.id,
            "nickname": self.nickname,
            "real_name": self.real_name,
            "phone": self.phone,
            "experience_years": self.experience_years,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Competitor":
        """Deserialize competitor from dictionary."""
        return cls(
            id=data["id"],
            nickname=data["nickname"],
            real_name=data["real_name"],
            phone=data.get("phone", ""),
            experience_years=data.get("experience_years", 0),
        )

    def __str__(self) -> str:
        return f"{self.nickname} ({self.real_name})"
