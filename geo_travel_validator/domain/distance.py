"""
Great-circle distance using the Haversine formula.

Assumption
----------
The Earth is treated as a sphere of mean radius 6 371 km.  Ellipsoidal
correction (Vincenty / geodesic) is not applied; the error stays well
below what matters for an impossible-travel heuristic.

Complexity: O(1) per call.
"""

import math

from .validation import validate_coordinates

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Return the great-circle distance in **km** between two validated points."""
    validate_coordinates(lat1, lon1)
    validate_coordinates(lat2, lon2)

    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
