"""Exception types raised while resolving, fetching and parsing league sheets."""

from typing import Optional


class LeagueSyncError(Exception):
    """Base class for every error raised by the sync package."""


class SheetMappingError(LeagueSyncError):
    """The sheet-name-to-gid mapping could not be built from the mapping sheet."""


class SheetNotFoundError(LeagueSyncError):
    def __init__(self, sheet_name: str):
        super().__init__(f'Sheet "{sheet_name}" not found in mappings')
        self.sheet_name = sheet_name


class SheetFetchError(LeagueSyncError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
