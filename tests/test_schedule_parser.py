"""
Tests for league_sync.schedule_parser.
"""
from __future__ import annotations

import pytest

from league_sync.models import GameRecord
from league_sync.schedule_parser import (
    LINE_RULES,
    find_week_date,
    format_date,
    parse_schedule,
    team_field_matches,
)
from league_sync.rules import first_rejection
from league_sync.settings import TEAMS

from .sample_sheets import WEEK_1_CSV


# ---------- Date handling ----------


@pytest.mark.parametrize(
    "value, expected",
    [
        ("5/4/2025", "2025-05-04"),
        ("12/25/2025", "2025-12-25"),
        ("2025-05-04", "2025-05-04"),
        ("Unknown", "Unknown"),
        (None, None),
        ("May 4", "May 4"),
        (" 5/4/2025", " 5/4/2025"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


def test_find_week_date_uses_first_week_row_with_a_date():
    lines = [
        "Game,Team 1,Team 2",
        "Week,1,TBD",
        "Week,1,5/11/2025,6/1/2025",
        "Week,1,7/1/2025",
    ]
    assert find_week_date(lines) == "5/11/2025"


def test_find_week_date_requires_week_prefix():
    assert find_week_date(["Date,5/4/2025", "week,5/4/2025"]) is None


# ---------- Team matching ----------


def test_team_matching_is_case_insensitive_both_ways():
    assert team_field_matches("maple leafs", TEAMS)
    assert team_field_matches("Bruins (home)", TEAMS)
    assert not team_field_matches("North", TEAMS)
    assert not team_field_matches("", TEAMS)


def test_partial_team_name_matches():
    # A fragment of a team name counts as a match
    assert team_field_matches("Red", TEAMS)
    assert team_field_matches("a", TEAMS)


# ---------- Game discovery ----------


def test_game_among_other_fields():
    games = parse_schedule("7:00 PM,Maple Leafs,vs,Red Wings,North Rink", 3, TEAMS)

    assert games == [GameRecord(week=3, date="Unknown", team1="Maple Leafs", team2="Red Wings")]


def test_single_team_match_yields_nothing():
    assert parse_schedule("7:00 PM,Maple Leafs,North Rink", 3, TEAMS) == []


def test_more_than_two_matches_uses_first_two():
    games = parse_schedule("Bruins,Canadiens,Red Wings", 2, TEAMS)

    assert [(game.team1, game.team2) for game in games] == [("Bruins", "Canadiens")]


@pytest.mark.parametrize(
    "line, rule",
    [
        ("Maple Leafs", "too-few-fields"),
        ("Team 1,Team 2", "team-column-header"),
        ("Game,Maple Leafs,Bruins", "game-column-header"),
        ("Maple Leafs,Bruins", None),
    ],
)
def test_schedule_line_rules(line, rule):
    assert first_rejection(LINE_RULES, line, line.split(",")) == rule


def test_week_sheet():
    games = parse_schedule(WEEK_1_CSV, 1, TEAMS)

    assert [game.as_dict() for game in games] == [
        {"week": 1, "date": "2025-05-04", "team1": "Maple Leafs", "team2": "Red Wings"},
        {"week": 1, "date": "2025-05-04", "team1": "Canadiens", "team2": "Bruins"},
    ]


def test_missing_date_is_unknown():
    games = parse_schedule("1,Maple Leafs,Canadiens\n", 4, TEAMS)

    assert games[0].date == "Unknown"


def test_empty_sheet():
    assert parse_schedule("", 1, TEAMS) == []
    assert parse_schedule(None, 1, TEAMS) == []
