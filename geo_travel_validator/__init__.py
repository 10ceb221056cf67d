"""
Geo Travel Validator
====================
Decides whether travel between two timestamped locations is physically
plausible under a maximum speed ("impossible travel" detection).
"""

from .config import FeasibilityConfig, Settings, get_settings
from .domain.distance import EARTH_RADIUS_KM, haversine_km
from .domain.entities import (
    FeasibilityResult,
    InvalidCoordinate,
    InvalidTimestamp,
    Observation,
    TravelValidationError,
)
from .domain.feasibility import (
    FeasibilityEvaluator,
    evaluate,
    is_travel_possible,
    required_speed_kmh,
)
from .domain.validation import validate_coordinates

__all__ = [
    "EARTH_RADIUS_KM",
    "FeasibilityConfig",
    "FeasibilityEvaluator",
    "FeasibilityResult",
    "InvalidCoordinate",
    "InvalidTimestamp",
    "Observation",
    "Settings",
    "TravelValidationError",
    "evaluate",
    "get_settings",
    "haversine_km",
    "is_travel_possible",
    "required_speed_kmh",
    "validate_coordinates",
]
