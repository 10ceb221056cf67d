"""Shared test fixtures: well-known cities and timestamp helpers."""

from datetime import datetime, timezone

import pytest

from geo_travel_validator.domain.entities import Observation

NEW_YORK = (40.7128, -74.0060)
LOS_ANGELES = (34.0522, -118.2437)
LONDON = (51.5074, -0.1278)
PARIS = (48.8566, 2.3522)


def at(hour: int, minute: int = 0, second: int = 0) -> datetime:
    return datetime(2024, 1, 1, hour, minute, second, tzinfo=timezone.utc)


@pytest.fixture
def new_york_noon() -> Observation:
    return Observation(at(12), *NEW_YORK)


@pytest.fixture
def los_angeles_four_pm() -> Observation:
    return Observation(at(16), *LOS_ANGELES)
