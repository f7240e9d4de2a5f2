"""CSV ingestion for game titles and competitors.

Both files start with a header row. Blank rows are ignored; rows that are
too short or fail validation are skipped with a warning rather than
aborting the load.

games.csv columns:  ID, Name, BasePointPerRound
gamers.csv columns: ID, Nickname, Name, Phone, ExperienceYears
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

import csv
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from esportsseason.constants import CSV_DELIMITER, CSV_ENCODING
from esportsseason.exceptions import FileLoadException, ValidationException
from esportsseason.models import Competitor, GameTitle
from esportsseason.utils import setup_logger
from esportsseason.utils.validation import (
    validate_experience,
    validate_non_empty,
    validate_non_negative_integer,
    validate_phone,
)

logger = setup_logger(__name__)

GAME_COLUMNS = 3
GAMER_COLUMNS = 5


def _data_rows(path: Union[str, Path], min_columns: int) -> Iterator[Tuple[int, List[str]]]:
    """Yield (line number, cells) for each usable data row after the header."""
    path = Path(path)
    try:
        with open(path, "r", encoding=CSV_ENCODING, newline="") as f:
            reader = csv.reader(f, delimiter=CSV_DELIMITER)
            next(reader, None)  # header
            for row in reader:
                line_number = reader.line_num
                if not any(cell.strip() for cell in row):
                    continue
                if len(row) < min_columns:
                    logger.warning(
                        "%s:%s: expected %s columns, got %s; row skipped",
                        path.name,
                        line_number,
                        min_columns,
                        len(row),
                    )
                    continue
                yield line_number, [cell.strip() for cell in row]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise FileLoadException(f"Cannot read {path}: {e}") from e


def _skip(path: Union[str, Path], line_number: int, reason: str) -> None:
    logger.warning("%s:%s: %s; row skipped", Path(path).name, line_number, reason)


def read_game_titles(path: Union[str, Path]) -> List[GameTitle]:
    """Load the title pool from a games CSV file.

    Args:
        path: Path to games.csv

    Returns:
        Valid titles in file order

    Raises:
        FileLoadException: If the file cannot be read
    """
    titles: List[GameTitle] = []
    for line_number, cells in _data_rows(path, GAME_COLUMNS):
        game_id = validate_non_negative_integer(cells[0], "Game id")
        name = validate_non_empty(cells[1], "Game name")
        base = validate_non_negative_integer(cells[2], "Base points per round")

        failed = next((r for r in (game_id, name, base) if not r), None)
        if failed is not None:
            _skip(path, line_number, failed.error_message)
            continue

        titles.append(
            GameTitle(
                id=game_id.sanitized_value,
                name=name.sanitized_value,
                base_points_per_round=base.sanitized_value,
            )
        )

    logger.info("Loaded %s game titles from %s", len(titles), path)
    return titles


def read_competitors(path: Union[str, Path]) -> List[Competitor]:
    """Load the roster from a gamers CSV file.

    Negative experience values are clamped to 0 rather than rejected.

    Args:
        path: Path to gamers.csv

    Returns:
        Valid competitors in file order

    Raises:
        FileLoadException: If the file cannot be read
    """
    competitors: List[Competitor] = []
    for line_number, cells in _data_rows(path, GAMER_COLUMNS):
        checks = (
            validate_non_negative_integer(cells[0], "Competitor id"),
            validate_non_empty(cells[1], "Nickname"),
            validate_non_empty(cells[2], "Real name"),
            validate_phone(cells[3]),
            validate_experience(cells[4]),
        )
        failed = next((r for r in checks if not r), None)
        if failed is not None:
            _skip(path, line_number, failed.error_message)
            continue

        competitor_id, nickname, real_name, phone, experience = (
            r.sanitized_value for r in checks
        )
        try:
            competitors.append(
                Competitor(
                    id=competitor_id,
                    nickname=nickname,
                    real_name=real_name,
                    phone=phone,
                    experience_years=experience,
                )
            )
        except ValidationException as e:
            _skip(path, line_number, str(e))

    logger.info("Loaded %s competitors from %s", len(competitors), path)
    return competitors
