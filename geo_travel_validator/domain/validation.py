"""
Input validation for observations.

Coordinates are range-checked before any geometry runs; timestamps are
coerced to timezone-aware instants so that naive and aware values can be
ordered and subtracted.
"""

from __future__ import annotations

import numbers
from datetime import datetime, timezone
from typing import Any

from .entities import InvalidCoordinate, InvalidTimestamp

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def _check_range(field: str, value: Any, bounds: tuple[float, float]) -> None:
    lower, upper = bounds
    # bool is an int subclass; NaN fails the chained comparison
    if (
        isinstance(value, bool)
        or not isinstance(value, numbers.Real)
        or not lower <= value <= upper
    ):
        raise InvalidCoordinate(field, value, lower, upper)


def validate_coordinates(lat: float, lon: float, prefix: str = "") -> None:
    """
    Raise ``InvalidCoordinate`` unless ``-90 <= lat <= 90`` and ``-180 <= lon <= 180``.

    *prefix* is prepended to the reported field name, e.g.
    ``"observation_b."`` yields ``"observation_b.latitude"``.
    """
    _check_range(f"{prefix}latitude", lat, LATITUDE_RANGE)
    _check_range(f"{prefix}longitude", lon, LONGITUDE_RANGE)


def coerce_timestamp(value: Any, field: str = "timestamp") -> datetime:
    """
    Return *value* as a timezone-aware ``datetime``.

    Accepts ``datetime`` instances and ISO-8601 strings (a trailing ``Z``
    is read as UTC).  Naive values are taken to be UTC.  Anything else
    raises ``InvalidTimestamp`` naming *field*.
    """
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidTimestamp(field, value) from None
    elif not isinstance(value, datetime):
        raise InvalidTimestamp(field, value)

    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value
