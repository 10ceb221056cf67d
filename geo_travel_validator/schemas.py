"""Pydantic schemas for callers that hold login events as plain mappings."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, ValidationError

from .domain.entities import (
    FeasibilityResult,
    InvalidCoordinate,
    InvalidTimestamp,
    Observation,
)
from .domain.validation import LATITUDE_RANGE, LONGITUDE_RANGE, coerce_timestamp

_COORDINATE_RANGES = {"latitude": LATITUDE_RANGE, "longitude": LONGITUDE_RANGE}


# ── Requests ──────────────────────────────────────────────────────────


class LoginEventPayload(BaseModel):
    # Strict numbers keep bools and numeric strings out.  Ranges are
    # checked by the evaluator so they surface as InvalidCoordinate.
    timestamp: datetime
    latitude: Union[StrictInt, StrictFloat]
    longitude: Union[StrictInt, StrictFloat]
    user_id: Optional[str] = Field(
        None,
        description="Carried for the caller's bookkeeping; never compared.",
    )

    @classmethod
    def parse(cls, data: Mapping[str, Any]) -> "LoginEventPayload":
        """
        Validate *data*, reporting a bad timestamp as ``InvalidTimestamp``
        and a non-numeric coordinate as ``InvalidCoordinate``.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            failed = {err["loc"][0] for err in exc.errors() if err["loc"]}
            if "timestamp" in failed:
                raise InvalidTimestamp("timestamp", data.get("timestamp")) from exc
            for field, (lower, upper) in _COORDINATE_RANGES.items():
                if field in failed:
                    raise InvalidCoordinate(field, data.get(field), lower, upper) from exc
            raise

    def to_observation(self) -> Observation:
        return Observation(
            timestamp=coerce_timestamp(self.timestamp),
            latitude=self.latitude,
            longitude=self.longitude,
        )


# ── Responses ─────────────────────────────────────────────────────────


class TravelPossibilityResponse(BaseModel):
    possible: bool
    required_speed_kmh: float = Field(..., alias="requiredSpeedKmh")
    max_allowed_speed_kmh: float = Field(..., alias="maxAllowedSpeedKmh")
    distance_km: float = Field(..., alias="distanceKm")
    time_difference_minutes: float = Field(..., alias="timeDifferenceMinutes")

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def from_result(cls, result: FeasibilityResult) -> "TravelPossibilityResponse":
        return cls.model_validate(result.to_dict())
