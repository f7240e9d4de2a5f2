import json

import pytest

from esportsseason.constants import DEFAULT_GAMES_FILE, SEASON_LENGTH
from esportsseason.exceptions import FileLoadException, InvalidConfigurationException
from esportsseason.season import SeasonConfig


def test_defaults():
    config = SeasonConfig()
    assert config.season_length == SEASON_LENGTH
    assert config.seed is None
    assert config.games_path == str(DEFAULT_GAMES_FILE)
    config.validate()


def test_round_trip_through_dict():
    config = SeasonConfig(name="Spring Split", season_length=10, seed=5)
    assert SeasonConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize(
    "data",
    [{"season_length": 0}, {"season_length": "15"}, {"seed": "abc"}, {"seed": 1.5}],
)
def test_invalid_values(data):
    with pytest.raises(InvalidConfigurationException):
        SeasonConfig.from_dict(data)


def test_from_file_resolves_relative_paths(tmp_path):
    path = tmp_path / "season.json"
    path.write_text(
        json.dumps({"name": "Cup", "seed": 3, "games_path": "games.csv"}),
        encoding="utf-8",
    )

    config = SeasonConfig.from_file(path)

    assert config.name == "Cup"
    assert config.seed == 3
    assert config.games_path == str(tmp_path / "games.csv")


def test_from_file_errors(tmp_path):
    with pytest.raises(FileLoadException):
        SeasonConfig.from_file(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidConfigurationException):
        SeasonConfig.from_file(broken)

    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(InvalidConfigurationException):
        SeasonConfig.from_file(listing)
