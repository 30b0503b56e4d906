"""
Weather snapshot models — the single input to the advisory engine.

``WeatherSnapshot`` bundles one ``CurrentReading`` with an ordered tuple of
``ForecastDay`` records (index 0 = today).  It is produced by the ingestion
layer (provider payload loader or the synthetic generator) and never mutated
afterwards.

Structural validation happens here, at construction time: humidity must be a
percentage, precipitation / wind / UV non-negative, and non-finite numbers are
rejected outright.  The rule engine downstream assumes a valid snapshot and
performs no checks of its own.

Missing forecast days are represented by a *short* tuple, never by padding.
Use ``forecast_day(i)`` to read a day; it returns ``None`` for an absent
index so rules can skip it instead of reading zeros.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

MAX_FORECAST_DAYS = 14


class CurrentReading(BaseModel):
    """Observed weather at the moment the snapshot was taken.

    Attributes:
        temperature_c: Air temperature in °C.
        humidity_pct: Relative humidity in percent, 0–100.
        precipitation_mm: Recent precipitation in millimetres.
        wind_kph: Wind speed in km/h.
        uv_index: UV index (0 = none).
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    temperature_c: float
    humidity_pct: float
    precipitation_mm: float = 0.0
    wind_kph: float = 0.0
    uv_index: float = 0.0

    @field_validator("humidity_pct")
    @classmethod
    def validate_humidity(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError(f"humidity_pct must be in [0, 100], got {v}.")
        return v

    @field_validator("precipitation_mm", "wind_kph", "uv_index")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"value must be non-negative, got {v}.")
        return v


class ForecastDay(BaseModel):
    """Daily forecast aggregate.

    Attributes:
        forecast_date: Calendar date of the day, when the provider supplies one.
        max_temp_c: Daily maximum temperature (°C).
        min_temp_c: Daily minimum temperature (°C).
        avg_temp_c: Daily mean temperature (°C).
        total_precip_mm: Total precipitation over the day (mm).
        max_wind_kph: Maximum sustained wind (km/h).
        avg_humidity_pct: Mean relative humidity (%).
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    forecast_date: Optional[date] = None
    max_temp_c: float
    min_temp_c: float
    avg_temp_c: float
    total_precip_mm: float = 0.0
    max_wind_kph: float = 0.0
    avg_humidity_pct: float

    @field_validator("avg_humidity_pct")
    @classmethod
    def validate_humidity(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError(f"avg_humidity_pct must be in [0, 100], got {v}.")
        return v

    @field_validator("total_precip_mm", "max_wind_kph")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"value must be non-negative, got {v}.")
        return v

    @model_validator(mode="after")
    def validate_temperature_range(self) -> "ForecastDay":
        if self.min_temp_c > self.max_temp_c:
            raise ValueError(
                f"min_temp_c ({self.min_temp_c}) must be <= "
                f"max_temp_c ({self.max_temp_c})."
            )
        return self


class WeatherSnapshot(BaseModel):
    """One point-in-time weather observation: current reading + daily forecast.

    Attributes:
        current: The current-instant reading.
        forecast_days: Ordered daily forecasts; index 0 is today.  May hold
            fewer than the usual seven days.
        location: Optional display label (city / farm name).  Never read by
            the rule engine.
    """

    model_config = ConfigDict(frozen=True)

    current: CurrentReading
    forecast_days: tuple[ForecastDay, ...] = ()
    location: Optional[str] = None

    @field_validator("forecast_days")
    @classmethod
    def validate_forecast_length(
        cls, v: tuple[ForecastDay, ...]
    ) -> tuple[ForecastDay, ...]:
        if len(v) > MAX_FORECAST_DAYS:
            raise ValueError(
                f"At most {MAX_FORECAST_DAYS} forecast days supported, got {len(v)}."
            )
        return v

    def forecast_day(self, index: int) -> Optional[ForecastDay]:
        """Return the forecast for day ``index`` (0 = today), or ``None`` if absent."""
        if 0 <= index < len(self.forecast_days):
            return self.forecast_days[index]
        return None

    @property
    def tomorrow(self) -> Optional[ForecastDay]:
        return self.forecast_day(1)

    @property
    def day_after(self) -> Optional[ForecastDay]:
        return self.forecast_day(2)
