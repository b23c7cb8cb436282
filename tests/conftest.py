from __future__ import annotations

import pytest

from league_sync import SheetLocator, SheetReader
from league_sync.settings import FALLBACK_SHEET_MAPPINGS

from .sample_sheets import BASE_URL, FakeSession


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def static_locator(fake_session):
    return SheetLocator.static(BASE_URL, FALLBACK_SHEET_MAPPINGS, session=fake_session)


@pytest.fixture
def reader(fake_session):
    return SheetReader(BASE_URL, session=fake_session)
