"""Feasibility thresholds and environment-driven defaults."""

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

DEFAULT_MAX_SPEED_KMH = 1200.0  # above commercial cruise speed
DEFAULT_DECIMAL_PRECISION = 2


class FeasibilityConfig(BaseModel):
    """Per-call thresholds.  Frozen so one caller can never alter another's."""

    max_speed_kmh: float = Field(DEFAULT_MAX_SPEED_KMH, gt=0)
    decimal_precision: int = Field(DEFAULT_DECIMAL_PRECISION, ge=0)

    model_config = {"frozen": True}


class Settings(BaseSettings):
    # Feasibility
    max_speed_kmh: float = Field(DEFAULT_MAX_SPEED_KMH, gt=0)
    decimal_precision: int = Field(DEFAULT_DECIMAL_PRECISION, ge=0)

    model_config = {"env_prefix": "GEO_TRAVEL_", "env_file": ".env", "extra": "ignore"}

    def feasibility_config(self) -> FeasibilityConfig:
        return FeasibilityConfig(
            max_speed_kmh=self.max_speed_kmh,
            decimal_precision=self.decimal_precision,
        )


@lru_cache
def get_settings() -> Settings:
    """Read settings on first use so a bad environment only fails callers that ask."""
    return Settings()
