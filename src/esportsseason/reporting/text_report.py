"""Plain-text rendering of the season query report."""

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

from typing import List, Optional, Sequence

from esportsseason.constants import QUERY_TITLES
from esportsseason.queries.models import (
    LowestMatchResult,
    MatchSummary,
    MedalDistribution,
    QueryReport,
    TopCompetitorResult,
    TournamentTotals,
)
from esportsseason.season.models import SeasonRecord

NO_MATCHES = "No matches found."
NO_GAMERS = "No gamers found."


def _heading(number: int) -> str:
    return f"{number}. {QUERY_TITLES[number]}"


def _join(values: Sequence) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def match_details(summary: MatchSummary) -> List[str]:
    """Lines describing one match, shared by queries 1 and 2."""
    return [
        f" Match ID: {summary.match_id}",
        f" Games: {_join(summary.title_names)}",
        f" Rounds: {_join(summary.rounds)}",
        f" Raw Points: {summary.raw_points}",
        f" Skill Points: {summary.skill_points}",
        f" Bonus Points: {summary.bonus_points}",
        f" Match Points: {summary.match_points}",
    ]


def render_highest_scoring_match(result: Optional[MatchSummary]) -> List[str]:
    lines = [_heading(1)]
    if result is None:
        return lines + [NO_MATCHES]
    return lines + ["Highest-Scoring Match:"] + match_details(result)


def render_lowest_scoring_match(result: Optional[LowestMatchResult]) -> List[str]:
    lines = [_heading(2)]
    if result is None:
        return lines + [NO_MATCHES]
    return (
        lines
        + ["Lowest-Scoring Match:"]
        + match_details(result.match)
        + [
            "Most Contributing Game in this Match:",
            f" Game: {result.top_title_name}",
            f" Contribution: {result.top_title_rounds} rounds x "
            f"{result.top_title_base_points} points = {result.contribution}",
        ]
    )


def render_lowest_bonus_match(result: Optional[MatchSummary]) -> List[str]:
    lines = [_heading(3)]
    if result is None:
        return lines + [NO_MATCHES]
    return lines + [
        "Match with Lowest Bonus Points:",
        f" Match ID: {result.match_id}",
        f" Games: {_join(result.title_names)}",
        f" Skill Points: {result.skill_points}",
        f" Bonus Points: {result.bonus_points}",
        f" Match Points: {result.match_points}",
    ]


def render_highest_scoring_competitor(
    result: Optional[TopCompetitorResult],
) -> List[str]:
    lines = [_heading(4)]
    if result is None:
        return lines + [NO_GAMERS]
    return lines + [
        "Highest-Scoring Gamer:",
        f" Nickname: {result.nickname}",
        f" Name: {result.real_name}",
        f" Total Points: {result.total_points}",
        f" Average Per Match: {result.average_per_match:.2f}",
        f" Medal: {result.medal.display_name}",
    ]


def render_total_tournament_points(result: Optional[TournamentTotals]) -> List[str]:
    lines = [_heading(5)]
    if result is None:
        return lines + [NO_GAMERS]
    return lines + [
        f"Total Tournament Points across {result.match_count} matches: "
        f"{result.total_points}"
    ]


def render_medal_distribution(result: Optional[MedalDistribution]) -> List[str]:
    lines = [_heading(6)]
    if result is None:
        return lines + [NO_GAMERS]
    lines.append("Medal Distribution:")
    for share in result.shares:
        label = f"{share.medal.display_name}:"
        lines.append(f" {label:<7} {share.count} gamers ({share.percentage:.1f}%)")
    return lines


RENDERERS = {
    1: lambda report: render_highest_scoring_match(report.highest_scoring_match),
    2: lambda report: render_lowest_scoring_match(report.lowest_scoring_match),
    3: lambda report: render_lowest_bonus_match(report.lowest_bonus_match),
    4: lambda report: render_highest_scoring_competitor(
        report.highest_scoring_competitor
    ),
    5: lambda report: render_total_tournament_points(report.total_tournament_points),
    6: lambda report: render_medal_distribution(report.medal_distribution),
}


def render_query(report: QueryReport, number: int) -> str:
    """Render a single query (1-6) of the report."""
    if number not in RENDERERS:
        raise ValueError(f"Unknown query number: {number}")
    return "\n".join(RENDERERS[number](report))


def render_report(report: QueryReport) -> str:
    """Render all six queries, separated by blank lines."""
    return "\n\n".join(render_query(report, number) for number in sorted(RENDERERS))


def render_standings(records: Sequence[SeasonRecord]) -> str:
    """Season table ordered by total points, highest first."""
    if not records:
        return NO_GAMERS

    ranked = sorted(
        enumerate(records), key=lambda item: (-item[1].total_points, item[0])
    )
    lines = [f"{'#':>3}  {'Nickname':<16} {'Total':>6} {'Avg':>8}  Medal"]
    for rank, (_, record) in enumerate(ranked, start=1):
        lines.append(
            f"{rank:>3}  {record.competitor.nickname:<16} "
            f"{record.total_points:>6} {record.average_per_match:>8.2f}  "
            f"{record.medal.display_name}"
        )
    return "\n".join(lines)
