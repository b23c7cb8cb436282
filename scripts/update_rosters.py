#!/usr/bin/env python3
"""
Fetch every team roster sheet and write rosters.json.

Intended for scheduled runs (e.g., GitHub Actions cron) so the front-end
can stay completely static.
"""

import argparse
import logging
import sys

from league_sync import LeagueSyncError, LeagueUpdater, settings

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch team rosters and write JSON output.")
    parser.add_argument(
        "--output-dir",
        default=settings.OUTPUT_DIR,
        help=f"Directory to write rosters.json into (default: {settings.OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=settings.JSON_INDENT,
        help=f"Number of spaces for JSON indentation (default: {settings.JSON_INDENT}).",
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
        output_dir=args.output_dir,
        indent=args.indent,
        cache_bust=args.cache_bust,
    )
    try:
        path = updater.update_rosters()
    except LeagueSyncError:
        logger.exception("Error updating rosters")
        return 1

    logger.info("Rosters written to %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
