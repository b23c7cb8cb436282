"""
Tests for league_sync.updater.

The workbook is replaced by a FakeSession keyed on the fallback gids.
"""
from __future__ import annotations

import json

import pytest
import requests

from league_sync import LeagueUpdater, SheetLocator, SheetMappingError
from league_sync.settings import FALLBACK_SHEET_MAPPINGS, TEAMS
from league_sync.updater import write_json

from .sample_sheets import BASE_URL, ROSTER_CSV, WEEK_1_CSV, FakeResponse

MAPLE_LEAFS_GID = FALLBACK_SHEET_MAPPINGS["Maple Leafs"]
WEEK_1_GID = FALLBACK_SHEET_MAPPINGS["Week 1"]
WEEK_2_GID = FALLBACK_SHEET_MAPPINGS["Week 2"]


@pytest.fixture
def updater(static_locator, reader, tmp_path):
    return LeagueUpdater(static_locator, reader, weeks=[1, 2], output_dir=str(tmp_path))


def read_json(path):
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


# ---------- Rosters ----------


def test_failed_team_is_empty_and_run_continues(updater, fake_session, tmp_path):
    fake_session.responses[MAPLE_LEAFS_GID] = FakeResponse(200, ROSTER_CSV)
    fake_session.responses[FALLBACK_SHEET_MAPPINGS["Bruins"]] = requests.ConnectionError("down")

    path = updater.update_rosters()

    document = read_json(path)
    assert path == tmp_path / "rosters.json"
    assert list(document["teams"]) == TEAMS
    assert [p["name"] for p in document["teams"]["Maple Leafs"]["players"]] == [
        "John Smith",
        "Mike Jones",
    ]
    assert document["teams"]["Bruins"] == {"players": []}
    assert document["teams"]["Canadiens"] == {"players": []}
    assert "lastUpdated" in document


def test_team_without_mapping_is_empty(static_locator, reader, tmp_path):
    updater = LeagueUpdater(static_locator, reader, teams=["Flyers"], output_dir=str(tmp_path))

    assert updater.fetch_team_roster("Flyers") == []


# ---------- Schedule ----------


def test_schedule_from_week_sheets(updater, fake_session):
    fake_session.responses[WEEK_1_GID] = FakeResponse(200, WEEK_1_CSV)
    fake_session.responses[WEEK_2_GID] = FakeResponse(500)

    document = read_json(updater.update_schedule())

    assert document["teams"]["Maple Leafs"]["schedule"] == [
        {"week": 1, "date": "2025-05-04", "opponent": "Red Wings"}
    ]
    assert document["teams"]["Bruins"]["schedule"] == [
        {"week": 1, "date": "2025-05-04", "opponent": "Canadiens"}
    ]


def test_week_without_mapping_is_skipped(static_locator, reader, fake_session, tmp_path):
    fake_session.responses[WEEK_1_GID] = FakeResponse(200, WEEK_1_CSV)
    updater = LeagueUpdater(static_locator, reader, weeks=[1, 15], output_dir=str(tmp_path))

    games = updater.collect_games()

    assert len(games) == 2
    assert all(game.week == 1 for game in games)
    assert len(fake_session.calls) == 1


def test_no_games_uses_expected_schedule(updater):
    document = updater.build_schedule_document()

    assert len(document["teams"]["Canadiens"]["schedule"]) == 14


def test_no_games_without_fallback_is_empty(updater):
    document = updater.build_schedule_document(use_expected_fallback=False)

    assert all(team["schedule"] == [] for team in document["teams"].values())


def test_cache_bust_is_passed_to_reader(static_locator, reader, fake_session, tmp_path):
    fake_session.responses[WEEK_1_GID] = FakeResponse(200, WEEK_1_CSV)
    updater = LeagueUpdater(
        static_locator, reader, weeks=[1], output_dir=str(tmp_path), cache_bust=True
    )

    updater.collect_games()

    assert "&_t=" in fake_session.calls[0]


# ---------- Writing ----------


def test_mapping_failure_leaves_previous_file(reader, fake_session, tmp_path):
    previous = tmp_path / "schedule.json"
    previous.write_text('{"old": true}\n', encoding="utf-8")
    fake_session.responses["26105431"] = FakeResponse(200, "")
    locator = SheetLocator(
        BASE_URL, "26105431", FALLBACK_SHEET_MAPPINGS, session=fake_session
    )
    updater = LeagueUpdater(locator, reader, weeks=[1], output_dir=str(tmp_path))

    with pytest.raises(SheetMappingError):
        updater.update_schedule()

    assert read_json(previous) == {"old": True}


def test_write_json_creates_directory_and_overwrites(tmp_path):
    path = tmp_path / "nested" / "data" / "out.json"

    write_json({"a": 1}, path)
    write_json({"b": 2}, path, indent=2)

    assert read_json(path) == {"b": 2}
    assert path.read_text(encoding="utf-8").endswith("\n")
    assert [p.name for p in path.parent.iterdir()] == ["out.json"]


def test_header_only_mapping_sheet_skips_every_team(reader, fake_session, tmp_path):
    fake_session.responses["26105431"] = FakeResponse(200, "Sheets,GID\n")
    locator = SheetLocator(
        BASE_URL, "26105431", FALLBACK_SHEET_MAPPINGS, session=fake_session
    )
    updater = LeagueUpdater(locator, reader, output_dir=str(tmp_path))

    path = updater.update_rosters()

    document = read_json(path)
    assert all(team == {"players": []} for team in document["teams"].values())
    assert len(fake_session.calls) == 1
