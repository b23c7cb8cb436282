#!/usr/bin/env python3
"""
Fetch the weekly schedule sheets and write schedule.json.

When no game can be read from any week, the expected season pattern is
written instead unless --no-expected-fallback is given.
"""

import argparse
import logging
import sys
from typing import List

from league_sync import LeagueSyncError, LeagueUpdater, settings

logger = logging.getLogger(__name__)


def parse_weeks(value: str) -> List[int]:
    """Accept ``3``, ``1-14`` or ``1,3,5-7``."""
    weeks: List[int] = []
    try:
        for part in value.split(","):
            part = part.strip()
            if not part:
                continue
            if "-" in part:
                start, end = part.split("-", 1)
                weeks.extend(range(int(start), int(end) + 1))
            else:
                weeks.append(int(part))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid week list: {value!r}")

    if not weeks or any(week < 1 for week in weeks):
        raise argparse.ArgumentTypeError(f"invalid week list: {value!r}")
    return weeks


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch weekly schedules and write JSON output.")
    parser.add_argument(
        "--output-dir",
        default=settings.OUTPUT_DIR,
        help=f"Directory to write schedule.json into (default: {settings.OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=settings.JSON_INDENT,
        help=f"Number of spaces for JSON indentation (default: {settings.JSON_INDENT}).",
    )
    parser.add_argument(
        "--weeks",
        type=parse_weeks,
        default=settings.WEEKS,
        help="Weeks to fetch, e.g. 1-14 or 1,3,5 (default: 1-14).",
    )
    parser.add_argument(
        "--dynamic-mappings",
        action="store_true",
        help="Read sheet gids from the workbook's mapping sheet instead of the built-in table.",
    )
    parser.add_argument(
        "--cache-bust",
        action="store_true",
        help="Append a timestamp to sheet URLs to avoid stale cached exports.",
    )
    parser.add_argument(
        "--no-expected-fallback",
        action="store_true",
        help="Write an empty schedule instead of the expected pattern when no games are found.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every parsing decision.")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    updater = LeagueUpdater.from_settings(
        dynamic_mappings=args.dynamic_mappings,
        weeks=args.weeks,
        output_dir=args.output_dir,
        indent=args.indent,
        cache_bust=args.cache_bust,
    )
    try:
        path = updater.update_schedule(use_expected_fallback=not args.no_expected_fallback)
    except LeagueSyncError:
        logger.exception("Error updating schedule")
        return 1

    logger.info("Schedule written to %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
