"""Unit tests for the Haversine distance calculator."""

import pytest

from geo_travel_validator.domain.distance import EARTH_RADIUS_KM, haversine_km
from geo_travel_validator.domain.entities import InvalidCoordinate

from tests.conftest import LONDON, LOS_ANGELES, NEW_YORK, PARIS


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(19.0, 72.0, 19.0, 72.0) == 0.0

    def test_new_york_to_los_angeles(self):
        d = haversine_km(*NEW_YORK, *LOS_ANGELES)
        assert d == pytest.approx(3935.75, abs=0.5)

    def test_london_to_paris(self):
        d = haversine_km(*LONDON, *PARIS)
        assert 340.0 < d < 350.0

    @pytest.mark.parametrize(
        "a, b",
        [
            (NEW_YORK, LOS_ANGELES),
            (LONDON, PARIS),
            ((-33.8688, 151.2093), (35.6762, 139.6503)),
            ((90.0, 0.0), (-90.0, 0.0)),
        ],
    )
    def test_symmetric(self, a, b):
        assert haversine_km(*a, *b) == haversine_km(*b, *a)

    def test_antipodal_is_half_circumference(self):
        d = haversine_km(0.0, 0.0, 0.0, 180.0)
        assert d == pytest.approx(3.141592653589793 * EARTH_RADIUS_KM)

    def test_one_degree_of_latitude(self):
        d = haversine_km(0.0, 0.0, 1.0, 0.0)
        assert d == pytest.approx(111.195, abs=0.01)

    def test_dateline_crossing_is_short(self):
        d = haversine_km(0.0, 179.5, 0.0, -179.5)
        assert d == pytest.approx(111.195, abs=0.01)


class TestHaversineValidation:
    def test_invalid_first_point(self):
        with pytest.raises(InvalidCoordinate) as exc:
            haversine_km(95.0, 0.0, 0.0, 0.0)
        assert exc.value.field == "latitude"

    def test_invalid_second_point(self):
        with pytest.raises(InvalidCoordinate) as exc:
            haversine_km(0.0, 0.0, 0.0, -200.0)
        assert exc.value.field == "longitude"
        assert exc.value.value == -200.0
