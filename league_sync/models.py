from dataclasses import asdict, dataclass
from typing import Dict

UNKNOWN_DATE = "Unknown"


@dataclass
class PlayerRecord:
    number: int
    name: str
    goals: int = 0

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass
class GameRecord:
    """One game found on a weekly schedule sheet.

    The game is stored once, in the order the teams appeared on the sheet;
    per-team schedule entries are derived from it by the aggregator.
    """

    week: int
    date: str
    team1: str
    team2: str

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass
class ScheduleEntry:
    week: int
    date: str
    opponent: str

    def as_dict(self) -> Dict:
        return asdict(self)
