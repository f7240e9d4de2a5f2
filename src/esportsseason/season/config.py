"""SeasonConfig data class."""

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

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from esportsseason.constants import (
    DEFAULT_GAMERS_FILE,
    DEFAULT_GAMES_FILE,
    DEFAULT_SEASON_NAME,
    SEASON_LENGTH,
)
from esportsseason.exceptions import (
    FileLoadException,
    InvalidConfigurationException,
)
from esportsseason.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class SeasonConfig:
    """Season configuration settings.

    Attributes
    ----------
    name : str
        Season name, used in report headers.
    season_length : int
        Matches simulated per competitor; also the divisor for averages.
    seed : int, optional
        Seed for the simulator's random source. None means unseeded.
    games_path : str
        CSV file with the game title pool.
    gamers_path : str
        CSV file with the competitor roster.
    """

    name: str = DEFAULT_SEASON_NAME
    season_length: int = SEASON_LENGTH
    seed: Optional[int] = None
    games_path: str = str(DEFAULT_GAMES_FILE)
    gamers_path: str = str(DEFAULT_GAMERS_FILE)

    def validate(self) -> None:
        """Raise InvalidConfigurationException if any setting is unusable."""
        if not isinstance(self.season_length, int) or isinstance(
            self.season_length, bool
        ):
            raise InvalidConfigurationException(
                f"season_length must be an int, got {self.season_length!r}"
            )
        if self.season_length < 1:
            raise InvalidConfigurationException(
                f"season_length must be at least 1, got {self.season_length}"
            )
        if self.seed is not None and (
            not isinstance(self.seed, int) or isinstance(self.seed, bool)
        ):
            raise InvalidConfigurationException(
                f"seed must be an int or null, got {self.seed!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "season_length": self.season_length,
            "seed": self.seed,
            "games_path": self.games_path,
            "gamers_path": self.gamers_path,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SeasonConfig":
        """Deserialize configuration from dictionary."""
        config = cls(
            name=data.get("name", DEFAULT_SEASON_NAME),
            season_length=data.get("season_length", SEASON_LENGTH),
            seed=data.get("seed"),
            games_path=str(data.get("games_path", DEFAULT_GAMES_FILE)),
            gamers_path=str(data.get("gamers_path", DEFAULT_GAMERS_FILE)),
        )
        config.validate()
        return config

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SeasonConfig":
        """Load configuration from a JSON file.

        Relative CSV paths in the file are resolved against the file's folder.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise FileLoadException(f"Cannot read config file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise InvalidConfigurationException(
                f"Config file {path} is not valid JSON: {e}"
            ) from e

        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Config file {path} must contain a JSON object"
            )

        for key in ("games_path", "gamers_path"):
            if key in data and not Path(data[key]).is_absolute():
                data[key] = str(path.parent / data[key])

        logger.info("Loaded season config from %s", path)
        return cls.from_dict(data)
