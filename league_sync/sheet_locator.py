import logging
from typing import Dict, List, Mapping, Optional

import requests

from .csv_tokenizer import parse_csv_line, split_lines
from .errors import SheetMappingError, SheetNotFoundError
from .settings import OVERALL_GID
from .sheet_reader import build_sheet_url

logger = logging.getLogger(__name__)


def _strip_quotes(value: str) -> str:
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def parse_mapping_sheet(csv_text: str) -> Dict[str, str]:
    """Read ``sheet name, gid`` rows from the mapping sheet, skipping its header."""
    mappings: Dict[str, str] = {}
    for index, line in enumerate(split_lines(csv_text)):
        if index == 0 or not line.strip():
            continue

        parts = parse_csv_line(line)
        if len(parts) < 2:
            continue

        sheet_name = _strip_quotes(parts[0])
        gid = _strip_quotes(parts[1])
        if sheet_name and gid and sheet_name != "Sheets":
            logger.debug('Adding mapping for sheet "%s" with GID "%s"', sheet_name, gid)
            mappings[sheet_name] = gid
    return mappings


class SheetLocator:
    """Resolve sheet names of the published workbook to their gids.

    The mapping is read once from the workbook's mapping sheet and memoized on
    the instance. When the mapping sheet answers with an error status the
    fallback table is used instead. Any other failure leaves the locator
    uninitialized so the next lookup retries.
    """

    def __init__(
        self,
        base_url: str,
        mapping_gid: str,
        fallback_mappings: Mapping[str, str],
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url
        self.mapping_gid = mapping_gid
        self.fallback_mappings = dict(fallback_mappings)
        self.session = session or requests.Session()
        self.timeout = timeout
        self.mappings: Dict[str, str] = {"overall": OVERALL_GID}
        self.initialized = False

    @classmethod
    def static(
        cls,
        base_url: str,
        fallback_mappings: Mapping[str, str],
        session: Optional[requests.Session] = None,
    ) -> "SheetLocator":
        """Build a locator that uses the fallback table without asking the workbook."""
        locator = cls(base_url, mapping_gid="", fallback_mappings=fallback_mappings, session=session)
        locator.use_fallback()
        return locator

    # ------------------------------------------------------------------ #
    # Mapping lifecycle
    # ------------------------------------------------------------------ #
    def use_fallback(self) -> Dict[str, str]:
        self.mappings = dict(self.fallback_mappings)
        self.initialized = True
        return self.mappings

    def reset(self):
        self.initialized = False

    def load_mappings(self) -> Dict[str, str]:
        if self.initialized:
            return self.mappings

        mapping_url = build_sheet_url(self.base_url, self.mapping_gid)
        logger.info("Fetching sheet mappings from: %s", mapping_url)

        try:
            response = self.session.get(mapping_url, timeout=self.timeout)
            logger.info("Mapping response status: %s", response.status_code)

            if not response.ok:
                logger.info("GID mapping sheet not found, using fallback mappings")
                return self.use_fallback()

            data = response.text
            if not data or not data.strip():
                raise SheetMappingError("Received empty data from the GID Mapping sheet")

            parsed = parse_mapping_sheet(data)
            if not parsed:
                logger.warning("No sheet mappings found in the data, only the seeded sheets resolve")

            self.mappings.update(parsed)
            self.initialized = True
            logger.info("Loaded %d sheet mappings", len(self.mappings))
            return self.mappings
        except requests.RequestException as exc:
            logger.error("Error fetching sheet mappings: %s", exc)
            self.initialized = False
            raise SheetMappingError(f"Could not fetch the GID Mapping sheet: {exc}") from exc
        except SheetMappingError as exc:
            logger.error("Error fetching sheet mappings: %s", exc)
            self.initialized = False
            raise

    # ------------------------------------------------------------------ #
    # Lookups
    # ------------------------------------------------------------------ #
    def get_gid(self, sheet_name: str) -> str:
        mappings = self.load_mappings()
        gid = mappings.get(sheet_name)
        if not gid:
            logger.warning(
                'Sheet "%s" not found in mappings. Available sheets: %s',
                sheet_name,
                list(mappings),
            )
            raise SheetNotFoundError(sheet_name)
        return gid

    def get_sheet_url(self, sheet_name: str, cache_bust: bool = True) -> str:
        return build_sheet_url(self.base_url, self.get_gid(sheet_name), cache_bust=cache_bust)

    def available_sheets(self) -> List[str]:
        return list(self.load_mappings())
