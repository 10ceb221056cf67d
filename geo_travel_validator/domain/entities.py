"""
Domain value objects and error types.

Both ``Observation`` and ``FeasibilityResult`` are immutable and live only
for the duration of one evaluation call.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any


class TravelValidationError(ValueError):
    """Base class for inputs that cannot be evaluated."""


class InvalidCoordinate(TravelValidationError):
    """Raised when a latitude or longitude falls outside its valid range."""

    def __init__(self, field: str, value: Any, lower: float, upper: float):
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Invalid {field}: {value}. Must be between {lower:g} and {upper:g}."
        )


class InvalidTimestamp(TravelValidationError):
    """Raised when an observation does not carry a well-formed instant."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r} is not a valid instant.")


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Observation:
    """A timestamped location, e.g. one login event."""

    timestamp: datetime
    latitude: float
    longitude: float


@dataclass(frozen=True)
class FeasibilityResult:
    possible: bool
    required_speed_kmh: float
    max_allowed_speed_kmh: float
    distance_km: float
    time_difference_minutes: float

    @property
    def is_instantaneous(self) -> bool:
        """True when the two observations share the same instant."""
        return self.time_difference_minutes == 0

    @property
    def has_infinite_speed(self) -> bool:
        return math.isinf(self.required_speed_kmh)

    def to_dict(self) -> dict[str, Any]:
        return {
            "possible": self.possible,
            "requiredSpeedKmh": self.required_speed_kmh,
            "maxAllowedSpeedKmh": self.max_allowed_speed_kmh,
            "distanceKm": self.distance_km,
            "timeDifferenceMinutes": self.time_difference_minutes,
        }
