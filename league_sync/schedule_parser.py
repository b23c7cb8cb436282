"""Extract games and the week date from a weekly schedule sheet."""

import logging
import re
from typing import Iterable, List, Optional, Sequence

from .csv_tokenizer import split_fields, split_lines
from .models import UNKNOWN_DATE, GameRecord
from .rules import Rule, first_rejection

logger = logging.getLogger(__name__)

_SHEET_DATE = re.compile(r"\d{1,2}/\d{1,2}/\d{4}")
_US_DATE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Checked against (trimmed line, its fields).
LINE_RULES: List[Rule] = [
    Rule("too-few-fields", lambda line, fields: len(fields) < 2),
    Rule("team-column-header", lambda line, fields: "Team 1" in line),
    Rule("game-column-header", lambda line, fields: "Game" in line),
]


def find_week_date(lines: Iterable[str]) -> Optional[str]:
    """Return the first M/D/YYYY field of the first ``Week,`` row that has one."""
    for line in lines:
        line = line.strip()
        if not line.startswith("Week,"):
            continue
        for field in line.split(","):
            if _SHEET_DATE.search(field):
                logger.debug("Found week date: %s", field)
                return field
    return None


def format_date(value: Optional[str]) -> Optional[str]:
    """Normalize ``M/D/YYYY`` to ``YYYY-MM-DD``; any other value passes through."""
    if not value or value == UNKNOWN_DATE:
        return value
    if _ISO_DATE.match(value):
        return value

    match = _US_DATE.match(value)
    if match:
        month, day, year = match.groups()
        return f"{year}-{month.zfill(2)}-{day.zfill(2)}"
    return value


def team_field_matches(field: str, teams: Sequence[str]) -> bool:
    # Containment in either direction: "Red" and "Red Wings (home)" both match "Red Wings".
    if not field:
        return False
    lowered = field.lower()
    return any(lowered in team.lower() or team.lower() in lowered for team in teams)


def parse_schedule(csv_text: str, week: int, teams: Sequence[str]) -> List[GameRecord]:
    """Return the games listed on one week's sheet.

    A row is a game when at least two of its fields match a team name; the
    first two matching fields become team1 and team2.
    """
    if not csv_text:
        return []

    lines = split_lines(csv_text)
    logger.debug("Parsing Week %s data (%d lines)", week, len(lines))
    week_date = format_date(find_week_date(lines)) or UNKNOWN_DATE

    games: List[GameRecord] = []
    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue

        fields = split_fields(line)
        rejected_by = first_rejection(LINE_RULES, line, fields)
        if rejected_by:
            logger.debug("Skipping schedule line %r (%s)", line, rejected_by)
            continue

        team_fields = [field for field in fields if team_field_matches(field, teams)]
        if len(team_fields) < 2:
            continue

        game = GameRecord(week=week, date=week_date, team1=team_fields[0], team2=team_fields[1])
        logger.debug("Found game: %s vs %s on %s", game.team1, game.team2, game.date)
        games.append(game)

    logger.info("Parsed %d games from Week %s", len(games), week)
    return games
