"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from gridbill.config import Settings
from gridbill.core.dates import FixedClock
from gridbill.services.billing import UtilityService


@pytest.fixture
def clock() -> FixedClock:
    """A clock pinned to a known date, moved explicitly by tests."""
    return FixedClock(date(2024, 7, 1))


@pytest.fixture
def config() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def service(clock: FixedClock, config: Settings) -> UtilityService:
    """Provides a UtilityService with fresh in-memory registries."""
    return UtilityService(clock=clock, config=config)
