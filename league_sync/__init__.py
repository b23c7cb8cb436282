"""
Core utilities for the league sheets sync.

This package hosts the shared parsing and fetching logic so the update
scripts and the preview server build the same JSON documents.
"""

from .errors import LeagueSyncError, SheetFetchError, SheetMappingError, SheetNotFoundError
from .models import GameRecord, PlayerRecord, ScheduleEntry
from .sheet_locator import SheetLocator
from .sheet_reader import SheetReader
from .updater import LeagueUpdater

__all__ = [
    "GameRecord",
    "LeagueSyncError",
    "LeagueUpdater",
    "PlayerRecord",
    "ScheduleEntry",
    "SheetFetchError",
    "SheetLocator",
    "SheetMappingError",
    "SheetNotFoundError",
    "SheetReader",
]
