import pytest

from esportsseason.exceptions import (
    DuplicateTitleException,
    InvalidCompetitorException,
    InvalidGameTitleException,
    InvalidMatchShapeException,
    InvalidRoundException,
    MatchException,
    NilCompetitorException,
)
from esportsseason.models import Competitor, GameTitle, Match, Medal
from tests.utils import TITLE_A, TITLE_B, TITLE_C, TITLE_D, make_competitor


# ---------- GameTitle ----------


def test_game_title_trims_name():
    title = GameTitle(id=0, name="  Tetris ", base_points_per_round=0)
    assert title.name == "Tetris"
    assert title.to_dict() == {"id": 0, "name": "Tetris", "base_points_per_round": 0}
    assert GameTitle.from_dict(title.to_dict()) == title


@pytest.mark.parametrize(
    "kwargs",
    [
        {"id": -1, "name": "X", "base_points_per_round": 1},
        {"id": 1, "name": "   ", "base_points_per_round": 1},
        {"id": 1, "name": "X", "base_points_per_round": -5},
        {"id": "1", "name": "X", "base_points_per_round": 1},
    ],
)
def test_game_title_rejects_bad_fields(kwargs):
    with pytest.raises(InvalidGameTitleException):
        GameTitle(**kwargs)


def test_game_title_is_immutable():
    with pytest.raises(AttributeError):
        TITLE_A.base_points_per_round = 99


# ---------- Competitor ----------


def test_competitor_clamps_negative_experience():
    competitor = Competitor(
        id=3, nickname=" Nova ", real_name="Noah Kim", phone=None, experience_years=-4
    )
    assert competitor.experience_years == 0
    assert competitor.nickname == "Nova"
    assert competitor.phone == ""
    assert str(competitor) == "Nova (Noah Kim)"


def test_competitor_capped_experience():
    assert make_competitor(experience_years=7).capped_experience == 7
    assert make_competitor(experience_years=15).capped_experience == 10
    assert make_competitor(experience_years=15).experience_years == 15


@pytest.mark.parametrize(
    "kwargs",
    [
        {"id": -1, "nickname": "A", "real_name": "B"},
        {"id": 1, "nickname": "", "real_name": "B"},
        {"id": 1, "nickname": "A", "real_name": "  "},
        {"id": True, "nickname": "A", "real_name": "B"},
    ],
)
def test_competitor_rejects_bad_fields(kwargs):
    with pytest.raises(InvalidCompetitorException):
        Competitor(**kwargs)


def test_competitor_round_trips_through_dict():
    competitor = make_competitor(competitor_id=9, experience_years=4)
    assert Competitor.from_dict(competitor.to_dict()) == competitor


# ---------- Medal ----------


@pytest.mark.parametrize(
    "total, medal",
    [
        (0, Medal.NONE),
        (699, Medal.NONE),
        (700, Medal.BRONZE),
        (1199, Medal.BRONZE),
        (1200, Medal.SILVER),
        (1999, Medal.SILVER),
        (2000, Medal.GOLD),
        (9999, Medal.GOLD),
    ],
)
def test_medal_boundaries(total, medal):
    assert Medal.from_total_points(total) is medal


def test_medal_display_name():
    assert Medal.GOLD.display_name == "GOLD"
    assert str(Medal.NONE) == "NONE"


# ---------- Match ----------


def test_new_match_is_unscored():
    match = Match(1, [TITLE_A, TITLE_B, TITLE_C], [1, 5, 10])
    assert not match.is_scored
    assert match.raw_points is None
    assert match.match_points is None
    assert match.title_names == ("Alpha", "Bravo", "Charlie")
    assert match.rounds == (1, 5, 10)


@pytest.mark.parametrize(
    "titles, rounds",
    [
        ([TITLE_A, TITLE_B], [1, 1, 1]),
        ([TITLE_A, TITLE_B, TITLE_C, TITLE_D], [1, 1, 1]),
        ([TITLE_A, TITLE_B, TITLE_C], [1, 1]),
        ([TITLE_A, TITLE_B, TITLE_C], [1, 1, 1, 1]),
        ([TITLE_A, None, TITLE_C], [1, 1, 1]),
        (None, [1, 1, 1]),
    ],
)
def test_match_shape_errors(titles, rounds):
    with pytest.raises(InvalidMatchShapeException):
        Match(1, titles, rounds)


@pytest.mark.parametrize("bad_round", [0, 11, -3, 2.5, True])
def test_match_round_errors(bad_round):
    with pytest.raises(InvalidRoundException):
        Match(1, [TITLE_A, TITLE_B, TITLE_C], [1, bad_round, 1])


def test_match_duplicate_title_error():
    same_id = GameTitle(id=TITLE_A.id, name="Alpha Reloaded", base_points_per_round=99)
    with pytest.raises(DuplicateTitleException):
        Match(1, [TITLE_A, TITLE_B, same_id], [1, 1, 1])


@pytest.mark.parametrize("match_id", [-1, 0, True, "7"])
def test_match_rejects_non_positive_id(match_id):
    with pytest.raises(MatchException):
        Match(match_id, [TITLE_A, TITLE_B, TITLE_C], [1, 1, 1])


def test_match_accepts_first_positive_id():
    assert Match(1, [TITLE_A, TITLE_B, TITLE_C], [1, 1, 1]).id == 1


def test_compute_points_requires_competitor():
    match = Match(1, [TITLE_A, TITLE_B, TITLE_C], [1, 1, 1])
    with pytest.raises(NilCompetitorException):
        match.compute_points_for(None)
    assert not match.is_scored


def test_compute_points_is_idempotent_and_overwrites():
    match = Match(1, [TITLE_A, TITLE_B, TITLE_C], [5, 5, 5])
    rookie = make_competitor(experience_years=0)
    veteran = make_competitor(experience_years=10)

    match.compute_points_for(rookie)
    first = match.to_dict()
    match.compute_points_for(rookie)
    assert match.to_dict() == first
    assert match.match_points == 300 + 25

    match.compute_points_for(veteran)
    assert match.match_points == 360 + 25


def test_match_copy_is_independent():
    match = Match(7, [TITLE_A, TITLE_B, TITLE_C], [2, 2, 2])
    match.compute_points_for(make_competitor())
    clone = match.copy()

    assert clone == match
    assert clone is not match

    match.compute_points_for(make_competitor(experience_years=10))
    assert clone != match
    assert clone.match_points == 120 + 10


def test_game_title_identity_is_by_id():
    renamed = GameTitle(id=TITLE_A.id, name="Alpha Remastered", base_points_per_round=99)
    other = GameTitle(id=99, name=TITLE_A.name, base_points_per_round=10)

    assert renamed == TITLE_A
    assert hash(renamed) == hash(TITLE_A)
    assert len({TITLE_A, renamed}) == 1
    assert other != TITLE_A
