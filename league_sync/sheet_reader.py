import logging
import time
from typing import Optional

import requests

from .errors import SheetFetchError

logger = logging.getLogger(__name__)


def build_sheet_url(base_url: str, gid: str, cache_bust: bool = False) -> str:
    url = f"{base_url}?gid={gid}&single=true&output=csv"
    if cache_bust:
        url += f"&_t={int(time.time() * 1000)}"
    return url


class SheetReader:
    """Fetch single sheets of the published workbook as CSV text."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_csv(self, gid: str, cache_bust: bool = False) -> str:
        url = build_sheet_url(self.base_url, gid, cache_bust=cache_bust)
        return self.fetch_url(url)

    def fetch_url(self, url: str) -> str:
        logger.info("Fetching sheet from: %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise SheetFetchError(f"Failed to fetch {url}: {exc}") from exc

        if not response.ok:
            raise SheetFetchError(
                f"Failed to fetch {url}: {response.status_code}",
                status_code=response.status_code,
            )

        logger.debug("Received %d characters from %s", len(response.text), url)
        return response.text
