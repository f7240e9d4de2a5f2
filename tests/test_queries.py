import pytest

from esportsseason.models import GameTitle, Medal
from esportsseason.queries import QueryEngine
from esportsseason.season import SeasonAggregator, TournamentSimulator
from tests.utils import (
    ALL_TITLES,
    hundred_point_match,
    TITLE_A,
    TITLE_B,
    TITLE_C,
    TITLE_D,
    make_competitor,
    scored_match,
)

SEASON = 3


@pytest.fixture
def roster():
    return [make_competitor(1, "Ace"), make_competitor(2, "Bolt")]


@pytest.fixture
def grid(roster):
    ace, bolt = roster
    return [
        [
            scored_match(1, [TITLE_A, TITLE_B, TITLE_C], [1, 1, 1], ace),  # 70
            scored_match(2, [TITLE_B, TITLE_C, TITLE_D], [5, 5, 5], ace),  # 550
        ],
        [
            scored_match(3, [TITLE_A, TITLE_C, TITLE_D], [10, 10, 10], bolt),  # 1000
            scored_match(4, [TITLE_A, TITLE_B, TITLE_D], [1, 1, 1], bolt),  # 90
            scored_match(5, [TITLE_C, TITLE_B, TITLE_A], [1, 1, 1], bolt),  # 70
        ],
    ]


@pytest.fixture
def engine(grid, roster):
    aggregator = SeasonAggregator(roster, season_length=SEASON)
    aggregator.compute_season_results(grid)
    return QueryEngine(grid, roster, aggregator)


def test_highest_scoring_match(engine):
    result = engine.highest_scoring_match()

    assert result.match_id == 3
    assert result.title_names == ("Alpha", "Charlie", "Delta")
    assert result.rounds == (10, 10, 10)
    assert result.raw_points == 900
    assert result.skill_points == 900
    assert result.bonus_points == 100
    assert result.match_points == 1000


def test_lowest_scoring_match_first_occurrence_and_top_title(engine):
    result = engine.lowest_scoring_match()

    assert result.match.match_id == 1
    assert result.match.match_points == 70
    assert result.top_title_name == "Charlie"
    assert result.top_title_rounds == 1
    assert result.top_title_base_points == 30
    assert result.contribution == 30


def test_top_title_tie_picks_first_index(roster):
    # contributions: 2*10, 1*20, 4*5 -> all 20
    low = GameTitle(id=9, name="Echo", base_points_per_round=5)
    match = scored_match(1, [TITLE_A, TITLE_B, low], [2, 1, 4], roster[0])
    aggregator = SeasonAggregator(roster[:1], season_length=SEASON)
    aggregator.compute_season_results([[match]])

    result = QueryEngine([[match]], roster[:1], aggregator).lowest_scoring_match()

    assert result.top_title_name == "Alpha"
    assert result.contribution == 20


def test_lowest_bonus_match(engine):
    result = engine.lowest_bonus_match()
    assert result.match_id == 1
    assert result.bonus_points == 10


def test_highest_scoring_competitor(engine):
    result = engine.highest_scoring_competitor()

    assert result.nickname == "Bolt"
    assert result.real_name == "Bolt Player"
    assert result.total_points == 1160
    assert result.average_per_match == pytest.approx(1160 / SEASON)
    assert result.medal is Medal.BRONZE


def test_highest_scoring_match_ties_keep_first(roster):
    ace = roster[0]
    first = scored_match(10, [TITLE_A, TITLE_B, TITLE_C], [4, 4, 4], ace)
    second = scored_match(11, [TITLE_C, TITLE_B, TITLE_A], [4, 4, 4], ace)
    aggregator = SeasonAggregator(roster[:1])
    aggregator.compute_season_results([[first, second]])

    engine = QueryEngine([[first, second]], roster[:1], aggregator)

    assert engine.highest_scoring_match().match_id == 10
    assert engine.lowest_scoring_match().match.match_id == 10


def test_total_tournament_points(engine, grid):
    result = engine.total_tournament_points()

    cell_sum = sum(m.match_points for row in grid for m in row)
    assert result.total_points == 1780
    assert result.grid_points == cell_sum == 1780
    assert result.is_consistent
    assert result.match_count == 5


def test_medal_distribution(engine):
    result = engine.medal_distribution()

    assert result.roster_size == 2
    assert [s.medal for s in result.shares] == [
        Medal.GOLD,
        Medal.SILVER,
        Medal.BRONZE,
        Medal.NONE,
    ]
    assert [s.count for s in result.shares] == [0, 0, 1, 1]
    assert result.share_for(Medal.BRONZE).percentage == 50.0
    assert result.share_for(Medal.GOLD).percentage == 0.0


def test_medal_percentages_round_to_one_decimal():
    roster = [make_competitor(i, f"P{i}") for i in range(3)]
    gold_row = [
        scored_match(1, [TITLE_A, TITLE_C, TITLE_D], [10, 10, 10], roster[0]),
        scored_match(2, [TITLE_A, TITLE_C, TITLE_D], [10, 10, 10], roster[0]),
    ]
    silver_row = [
        scored_match(3, [TITLE_A, TITLE_C, TITLE_D], [10, 10, 10], roster[1]),
        scored_match(4, [TITLE_B, TITLE_C, TITLE_D], [5, 5, 5], roster[1]),
    ]
    none_row = [scored_match(5, [TITLE_A, TITLE_B, TITLE_C], [1, 1, 1], roster[2])]
    grid = [gold_row, silver_row, none_row]
    aggregator = SeasonAggregator(roster)
    aggregator.compute_season_results(grid)

    result = QueryEngine(grid, roster, aggregator).medal_distribution()

    assert [s.count for s in result.shares] == [1, 1, 0, 1]
    assert [s.percentage for s in result.shares] == [33.3, 33.3, 0.0, 33.3]
    assert abs(sum(s.percentage for s in result.shares) - 100.0) <= 0.4


def test_absent_cells_are_skipped(roster, grid):
    grid[1][0] = None
    aggregator = SeasonAggregator(roster, season_length=SEASON)
    aggregator.compute_season_results(grid)
    engine = QueryEngine(grid, roster, aggregator)

    assert engine.highest_scoring_match().match_id == 2
    assert engine.total_tournament_points().match_count == 4


@pytest.mark.parametrize("use_empty_roster", [True, False])
def test_no_data_for_every_query(roster, use_empty_roster):
    competitors = [] if use_empty_roster else roster
    aggregator = SeasonAggregator(competitors)
    aggregator.compute_season_results([])
    engine = QueryEngine([], competitors, aggregator)

    assert not engine.has_data()
    report = engine.run_all()
    assert report.highest_scoring_match is None
    assert report.lowest_scoring_match is None
    assert report.lowest_bonus_match is None
    assert report.highest_scoring_competitor is None
    assert report.total_tournament_points is None
    assert report.medal_distribution is None


def test_run_all_on_simulated_season_is_consistent():
    roster = [make_competitor(i, f"P{i}", experience_years=i * 2) for i in range(6)]
    simulator = TournamentSimulator(roster, ALL_TITLES, seed=8)
    simulator.simulate_season()
    grid = simulator.get_results_grid()
    aggregator = SeasonAggregator(roster)
    aggregator.compute_season_results(grid)

    report = QueryEngine(grid, roster, aggregator).run_all()

    all_points = [m.match_points for row in grid for m in row]
    assert report.highest_scoring_match.match_points == max(all_points)
    assert report.lowest_scoring_match.match.match_points == min(all_points)
    assert report.lowest_bonus_match.bonus_points == min(
        m.bonus_points for row in grid for m in row
    )
    assert report.total_tournament_points.total_points == sum(all_points)
    assert report.total_tournament_points.is_consistent
    assert report.highest_scoring_competitor.total_points == max(
        aggregator.get_all_total_points()
    )
    assert sum(s.count for s in report.medal_distribution.shares) == len(roster)
    assert report.to_dict()["season_length"] == 15


def test_queries_do_not_mutate_inputs(engine, grid):
    before = [[m.to_dict() for m in row] for row in grid]
    engine.run_all()
    assert [[m.to_dict() for m in row] for row in grid] == before


def test_medal_percentages_round_halves_up():
    roster = [make_competitor(i, f"P{i}") for i in range(1, 17)]
    champion = roster[0]
    grid = [
        [
            scored_match(1, [TITLE_B, TITLE_C, TITLE_D], [10, 10, 10], champion),
            scored_match(2, [TITLE_B, TITLE_C, TITLE_D], [10, 10, 10], champion),
        ]
    ]
    grid += [[hundred_point_match(i + 2, c)] for i, c in enumerate(roster[1:])]
    aggregator = SeasonAggregator(roster, season_length=SEASON)
    aggregator.compute_season_results(grid)

    result = QueryEngine(grid, roster, aggregator).medal_distribution()

    assert [s.count for s in result.shares] == [1, 0, 0, 15]
    assert result.share_for(Medal.GOLD).percentage == 6.3
    assert result.share_for(Medal.NONE).percentage == 93.8
