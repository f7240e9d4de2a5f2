"""Shared builders for the test suite."""

from typing import List, Sequence

from esportsseason.models import Competitor, GameTitle, Match

TITLE_A = GameTitle(id=1, name="Alpha", base_points_per_round=10)
TITLE_B = GameTitle(id=2, name="Bravo", base_points_per_round=20)
TITLE_C = GameTitle(id=3, name="Charlie", base_points_per_round=30)
TITLE_D = GameTitle(id=4, name="Delta", base_points_per_round=50)
ALL_TITLES = [TITLE_A, TITLE_B, TITLE_C, TITLE_D]


def make_competitor(
    competitor_id: int = 1, nickname: str = "Rookie", experience_years: int = 0
) -> Competitor:
    return Competitor(
        id=competitor_id,
        nickname=nickname,
        real_name=f"{nickname} Player",
        phone="555-0100",
        experience_years=experience_years,
    )


def scored_match(
    match_id: int,
    titles: Sequence[GameTitle],
    rounds: Sequence[int],
    competitor: Competitor,
) -> Match:
    match = Match(match_id, titles, rounds)
    match.compute_points_for(competitor)
    return match


def hundred_point_match(match_id: int, competitor: Competitor) -> Match:
    """A match worth exactly 100 points for a competitor with no experience."""
    flat = [
        GameTitle(id=i, name=f"Flat {i}", base_points_per_round=10) for i in (1, 2, 3)
    ]
    return scored_match(match_id, flat, [3, 3, 3], competitor)


class ScriptedRandom:
    """Random source that replays fixed values and records every draw."""

    def __init__(self, indices: List[int], rounds: List[int]) -> None:
        self._indices = list(indices)
        self._rounds = list(rounds)
        self.calls: List[str] = []

    def randrange(self, stop: int) -> int:
        self.calls.append("title")
        value = self._indices.pop(0)
        assert 0 <= value < stop
        return value

    def randint(self, a: int, b: int) -> int:
        self.calls.append("round")
        value = self._rounds.pop(0)
        assert a <= value <= b
        return value
