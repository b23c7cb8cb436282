import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from . import settings
from .aggregator import (
    build_roster_document,
    build_schedule_document,
    build_team_schedules,
    total_games,
)
from .errors import SheetFetchError, SheetNotFoundError
from .expected_schedule import build_expected_schedule
from .models import GameRecord, PlayerRecord
from .roster_parser import parse_roster
from .schedule_parser import parse_schedule
from .sheet_locator import SheetLocator
from .sheet_reader import SheetReader

logger = logging.getLogger(__name__)


def write_json(document: Dict, path: Path, indent: int = settings.JSON_INDENT) -> Path:
    """Replace ``path`` with ``document``; the old file survives a failed write."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(document, handle, indent=indent)
            handle.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise
    return path


class LeagueUpdater:
    """Build the roster and schedule documents from the published workbook.

    Units (one team sheet or one week sheet) are fetched one after another. A
    unit that cannot be resolved or fetched is logged and contributes nothing;
    the rest of the run carries on.
    """

    def __init__(
        self,
        locator: SheetLocator,
        reader: SheetReader,
        teams: Sequence[str] = settings.TEAMS,
        weeks: Sequence[int] = settings.WEEKS,
        output_dir: str = settings.OUTPUT_DIR,
        indent: int = settings.JSON_INDENT,
        cache_bust: bool = False,
    ):
        self.locator = locator
        self.reader = reader
        self.teams = list(teams)
        self.weeks = list(weeks)
        self.output_dir = Path(output_dir)
        self.indent = indent
        self.cache_bust = cache_bust

    @classmethod
    def from_settings(cls, dynamic_mappings: bool = False, **kwargs) -> "LeagueUpdater":
        reader = SheetReader(settings.BASE_SHEET_URL, timeout=settings.REQUEST_TIMEOUT)
        if dynamic_mappings:
            locator = SheetLocator(
                settings.BASE_SHEET_URL,
                settings.MAPPING_GID,
                settings.FALLBACK_SHEET_MAPPINGS,
                session=reader.session,
                timeout=settings.REQUEST_TIMEOUT,
            )
        else:
            locator = SheetLocator.static(
                settings.BASE_SHEET_URL, settings.FALLBACK_SHEET_MAPPINGS, session=reader.session
            )
        return cls(locator, reader, **kwargs)

    # ------------------------------------------------------------------ #
    # Rosters
    # ------------------------------------------------------------------ #
    def fetch_team_roster(self, team: str) -> List[PlayerRecord]:
        try:
            gid = self.locator.get_gid(team)
            csv_text = self.reader.fetch_csv(gid, cache_bust=self.cache_bust)
        except (SheetNotFoundError, SheetFetchError) as exc:
            logger.warning("Error fetching %s roster: %s", team, exc)
            return []
        return parse_roster(csv_text, team=team)

    def build_rosters_document(self) -> Dict:
        rosters = {team: self.fetch_team_roster(team) for team in self.teams}
        return build_roster_document(rosters)

    def update_rosters(self) -> Path:
        document = self.build_rosters_document()
        path = write_json(document, self.output_dir / settings.ROSTERS_FILENAME, self.indent)
        logger.info("Successfully updated %s", path)
        return path

    # ------------------------------------------------------------------ #
    # Schedule
    # ------------------------------------------------------------------ #
    def fetch_week_text(self, week: int) -> Optional[str]:
        sheet_name = settings.week_sheet_name(week)
        try:
            gid = self.locator.get_gid(sheet_name)
        except SheetNotFoundError:
            logger.info("No GID mapping found for week %s, skipping", week)
            return None

        try:
            return self.reader.fetch_csv(gid, cache_bust=self.cache_bust)
        except SheetFetchError as exc:
            logger.warning("Error fetching Week %s schedule: %s", week, exc)
            return None

    def collect_games(self) -> List[GameRecord]:
        games: List[GameRecord] = []
        for week in self.weeks:
            csv_text = self.fetch_week_text(week)
            if not csv_text:
                logger.info("Skipping Week %s - no data available", week)
                continue
            games.extend(parse_schedule(csv_text, week, self.teams))
        return games

    def build_schedule_document(self, use_expected_fallback: bool = True) -> Dict:
        schedules = build_team_schedules(self.collect_games(), self.teams)
        for team, entries in schedules.items():
            logger.info("%s: %d games", team, len(entries))

        if use_expected_fallback and total_games(schedules) == 0:
            logger.warning("No games found in the weekly sheets, using expected schedule pattern")
            schedules = build_expected_schedule(self.teams)

        return build_schedule_document(schedules)

    def update_schedule(self, use_expected_fallback: bool = True) -> Path:
        document = self.build_schedule_document(use_expected_fallback=use_expected_fallback)
        path = write_json(document, self.output_dir / settings.SCHEDULE_FILENAME, self.indent)
        logger.info("Successfully updated %s", path)
        return path
