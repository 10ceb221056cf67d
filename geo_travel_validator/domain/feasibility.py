"""
Travel Feasibility Evaluator
============================

Given two observations attributed to the same actor, decide whether the
implied travel between them is physically plausible.

Algorithm
---------
1. Order the observations chronologically.  On an exact timestamp tie the
   first argument is treated as the earlier one (a fixed, stable choice).
2. ``minutes = later - earlier`` (always >= 0).
3. Zero elapsed time:
   * same coordinates      -> possible, speed 0, distance 0
   * different coordinates -> impossible, speed ``inf``
4. Otherwise ``speed = distance / (minutes / 60)`` and
   ``possible = speed <= max_speed_kmh`` (boundary inclusive).

Numeric fields are rounded to ``decimal_precision`` only when the result
is built; the verdict always uses full-precision values.

Identity is not checked: callers must only pair observations that belong
to the same actor.

Complexity: O(1) per evaluation.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Optional

from ..config import (
    DEFAULT_DECIMAL_PRECISION,
    DEFAULT_MAX_SPEED_KMH,
    FeasibilityConfig,
)
from .distance import haversine_km
from .entities import FeasibilityResult, Observation
from .validation import coerce_timestamp, validate_coordinates

logger = logging.getLogger(__name__)


def required_speed_kmh(distance_km: float, minutes: float) -> float:
    """Average speed needed to cover *distance_km* in *minutes*; ``inf`` if no time elapsed."""
    if minutes <= 0:
        return math.inf
    return distance_km / (minutes / 60)


class FeasibilityEvaluator:
    """Evaluates observation pairs against one immutable configuration."""

    def __init__(self, config: Optional[FeasibilityConfig] = None):
        self.config = config or FeasibilityConfig()

    def evaluate(
        self, observation_a: Observation, observation_b: Observation
    ) -> FeasibilityResult:
        ts_a = coerce_timestamp(observation_a.timestamp, "observation_a.timestamp")
        ts_b = coerce_timestamp(observation_b.timestamp, "observation_b.timestamp")
        validate_coordinates(
            observation_a.latitude, observation_a.longitude, "observation_a."
        )
        validate_coordinates(
            observation_b.latitude, observation_b.longitude, "observation_b."
        )

        if ts_a <= ts_b:
            earlier, later = observation_a, observation_b
            minutes = _minutes_between(ts_a, ts_b)
        else:
            earlier, later = observation_b, observation_a
            minutes = _minutes_between(ts_b, ts_a)

        if minutes == 0:
            return self._instantaneous(earlier, later)

        distance = haversine_km(
            earlier.latitude, earlier.longitude,
            later.latitude, later.longitude,
        )
        speed = self.required_speed_kmh(distance, minutes)
        return self._build(speed <= self.config.max_speed_kmh, speed, distance, minutes)

    def required_speed_kmh(self, distance_km: float, minutes: float) -> float:
        return required_speed_kmh(distance_km, minutes)

    # ── Internals ─────────────────────────────────────────────────────

    def _instantaneous(
        self, earlier: Observation, later: Observation
    ) -> FeasibilityResult:
        if (
            earlier.latitude == later.latitude
            and earlier.longitude == later.longitude
        ):
            return self._build(True, 0.0, 0.0, 0.0)

        distance = haversine_km(
            earlier.latitude, earlier.longitude,
            later.latitude, later.longitude,
        )
        return self._build(False, math.inf, distance, 0.0)

    def _build(
        self, possible: bool, speed: float, distance: float, minutes: float
    ) -> FeasibilityResult:
        precision = self.config.decimal_precision
        result = FeasibilityResult(
            possible=possible,
            required_speed_kmh=round(speed, precision),
            max_allowed_speed_kmh=self.config.max_speed_kmh,
            distance_km=round(distance, precision),
            time_difference_minutes=round(minutes, precision),
        )
        logger.debug(
            "Travel evaluated: %.3f km in %.3f min -> %.3f km/h (max %.1f, possible=%s)",
            distance, minutes, speed, self.config.max_speed_kmh, possible,
        )
        if not possible:
            logger.info(
                "Impossible travel: %s km/h required, %s km/h allowed",
                result.required_speed_kmh, self.config.max_speed_kmh,
            )
        return result


def _minutes_between(earlier: datetime, later: datetime) -> float:
    return (later - earlier).total_seconds() / 60


# ── Public API ────────────────────────────────────────────────────────


def evaluate(
    observation_a: Observation,
    observation_b: Observation,
    max_speed_kmh: float = DEFAULT_MAX_SPEED_KMH,
    decimal_precision: int = DEFAULT_DECIMAL_PRECISION,
    *,
    config: Optional[FeasibilityConfig] = None,
) -> FeasibilityResult:
    """
    Decide whether travel between two observations is physically possible.

    An explicit *config* takes precedence over *max_speed_kmh* and
    *decimal_precision*.  Raises ``InvalidTimestamp`` or
    ``InvalidCoordinate`` before any result is built.
    """
    if config is None:
        config = FeasibilityConfig(
            max_speed_kmh=max_speed_kmh, decimal_precision=decimal_precision
        )
    return FeasibilityEvaluator(config).evaluate(observation_a, observation_b)


is_travel_possible = evaluate
