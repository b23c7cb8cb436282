"""Published 2025 season pattern, used when no games could be read from the sheets."""

from typing import Dict, List, Sequence, Tuple

from .models import ScheduleEntry

# (week, date, [(home, away), ...])
EXPECTED_SCHEDULE_PATTERN: List[Tuple[int, str, List[Tuple[str, str]]]] = [
    (1, "2025-05-04", [("Maple Leafs", "Red Wings"), ("Canadiens", "Bruins")]),
    (2, "2025-05-11", [("Maple Leafs", "Canadiens"), ("Bruins", "Red Wings")]),
    (3, "2025-05-18", [("Maple Leafs", "Bruins"), ("Canadiens", "Red Wings")]),
    (4, "2025-06-01", [("Maple Leafs", "Canadiens"), ("Bruins", "Red Wings")]),
    (5, "2025-06-08", [("Maple Leafs", "Bruins"), ("Canadiens", "Red Wings")]),
    (6, "2025-06-15", [("Maple Leafs", "Red Wings"), ("Canadiens", "Bruins")]),
    (7, "2025-06-29", [("Maple Leafs", "Canadiens"), ("Bruins", "Red Wings")]),
    (8, "2025-07-13", [("Maple Leafs", "Bruins"), ("Canadiens", "Red Wings")]),
    (9, "2025-07-20", [("Maple Leafs", "Red Wings"), ("Canadiens", "Bruins")]),
    (10, "2025-07-27", [("Maple Leafs", "Canadiens"), ("Bruins", "Red Wings")]),
    (11, "2025-08-03", [("Maple Leafs", "Bruins"), ("Canadiens", "Red Wings")]),
    (12, "2025-08-10", [("Maple Leafs", "Red Wings"), ("Canadiens", "Bruins")]),
    (13, "2025-08-17", [("Maple Leafs", "Canadiens"), ("Bruins", "Red Wings")]),
    (14, "2025-08-24", [("Maple Leafs", "Red Wings"), ("Canadiens", "Bruins")]),
]


def build_expected_schedule(teams: Sequence[str]) -> Dict[str, List[ScheduleEntry]]:
    schedules: Dict[str, List[ScheduleEntry]] = {team: [] for team in teams}

    for week, date, games in EXPECTED_SCHEDULE_PATTERN:
        for home, away in games:
            if home in schedules:
                schedules[home].append(ScheduleEntry(week=week, date=date, opponent=away))
            if away in schedules:
                schedules[away].append(ScheduleEntry(week=week, date=date, opponent=home))

    return schedules
