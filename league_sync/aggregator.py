"""Merge parsed records into the documents consumed by the front end."""

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .models import GameRecord, PlayerRecord, ScheduleEntry

logger = logging.getLogger(__name__)


def _add_entry(schedule: List[ScheduleEntry], entry: ScheduleEntry, team: str) -> bool:
    for existing in schedule:
        if existing.week == entry.week and existing.opponent == entry.opponent:
            logger.debug(
                "Skipping duplicate game for %s vs %s in week %s", team, entry.opponent, entry.week
            )
            return False
    schedule.append(entry)
    return True


def build_team_schedules(
    games: Iterable[GameRecord], teams: Sequence[str]
) -> Dict[str, List[ScheduleEntry]]:
    """Give every known team its list of games, one entry per (week, opponent)."""
    schedules: Dict[str, List[ScheduleEntry]] = {team: [] for team in teams}

    for game in games:
        if not game.team1 or not game.team2:
            continue
        for team, opponent in ((game.team1, game.team2), (game.team2, game.team1)):
            if team not in schedules:
                continue
            entry = ScheduleEntry(week=game.week, date=game.date, opponent=opponent)
            if _add_entry(schedules[team], entry, team):
                logger.debug("Added to %s schedule: vs %s", team, opponent)

    return schedules


def total_games(schedules: Mapping[str, List[ScheduleEntry]]) -> int:
    return sum(len(entries) for entries in schedules.values())


def _timestamp(timestamp: Optional[datetime]) -> str:
    return (timestamp or datetime.now(timezone.utc)).isoformat()


def build_roster_document(
    rosters: Mapping[str, List[PlayerRecord]], timestamp: Optional[datetime] = None
) -> Dict:
    return {
        "lastUpdated": _timestamp(timestamp),
        "teams": {
            team: {"players": [player.as_dict() for player in players]}
            for team, players in rosters.items()
        },
    }


def build_schedule_document(
    schedules: Mapping[str, List[ScheduleEntry]], timestamp: Optional[datetime] = None
) -> Dict:
    return {
        "lastUpdated": _timestamp(timestamp),
        "teams": {
            team: {"schedule": [entry.as_dict() for entry in entries]}
            for team, entries in schedules.items()
        },
    }
