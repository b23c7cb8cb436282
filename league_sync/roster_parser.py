"""Extract skater rows from a team roster sheet."""

import logging
import re
from typing import List, Optional

from .csv_tokenizer import split_fields, split_lines
from .models import PlayerRecord
from .rules import Rule, first_rejection

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"\d+", re.ASCII)
_ALL_DIGITS = re.compile(r"^\d+$", re.ASCII)

HEADER_NAME_MARKERS = ("player", "name", "week", "goals allowed", "save", "shot attempts")
SEPARATOR_ROWS = {",", ",,,,"}

# Checked against the trimmed line, before it is split.
LINE_RULES: List[Rule] = [
    Rule("team-name-header", lambda line: line.lower().startswith("team name")),
    Rule("coach-line", lambda line: line.lower().startswith("coach")),
    Rule("goalie-stats-section", lambda line: "goalie stats" in line.lower()),
    Rule("player-column-header", lambda line: "Player #" in line),
    Rule("empty-separator-row", lambda line: line in SEPARATOR_ROWS),
]

# Checked against (number field, name field).
FIELD_RULES: List[Rule] = [
    Rule("missing-number-or-name", lambda number, name: not number or not name),
    Rule("non-numeric-number", lambda number, name: parse_jersey_number(number) is None),
    Rule("goalie-marker", lambda number, name: "(G)" in name),
    Rule(
        "header-label-name",
        lambda number, name: any(marker in name.lower() for marker in HEADER_NAME_MARKERS),
    ),
    Rule("numeric-name", lambda number, name: bool(_ALL_DIGITS.match(name))),
    Rule("short-name", lambda number, name: len(name) < 2),
]


def parse_jersey_number(value: str) -> Optional[int]:
    """Read the leading run of digits, so ``"7a"`` is 7 and ``"#7"`` is None."""
    match = _LEADING_NUMBER.match(value)
    if not match:
        return None
    return int(match.group(0))


def parse_roster_line(line: str) -> Optional[PlayerRecord]:
    line = line.strip()
    if not line:
        return None

    rejected_by = first_rejection(LINE_RULES, line)
    if rejected_by:
        logger.debug("Skipping roster line %r (%s)", line, rejected_by)
        return None

    fields = split_fields(line)
    number = fields[0]
    name = fields[1] if len(fields) > 1 else ""

    rejected_by = first_rejection(FIELD_RULES, number, name)
    if rejected_by:
        logger.debug("Skipping roster line %r (%s)", line, rejected_by)
        return None

    return PlayerRecord(number=parse_jersey_number(number), name=name, goals=0)


def parse_roster(csv_text: str, team: Optional[str] = None) -> List[PlayerRecord]:
    """Return one PlayerRecord per skater line of a roster sheet.

    Goalies and header/label rows are dropped. Duplicate lines are kept as
    duplicate records.
    """
    players: List[PlayerRecord] = []
    for line in split_lines(csv_text or ""):
        player = parse_roster_line(line)
        if player is None:
            continue
        logger.debug("Adding player: %s - %s", player.number, player.name)
        players.append(player)

    logger.info("Parsed %d players for %s", len(players), team or "roster")
    return players
