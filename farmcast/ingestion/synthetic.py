"""
Synthetic weather snapshots for demos and offline runs.

``generate_snapshot(seed)`` draws a plausible mid-season snapshot from a
seeded ``random.Random`` so the same seed always yields the same snapshot,
and therefore the same advisory output.

Value ranges
------------
  current temperature   18–33 °C
  current humidity      45–85 %  (rounded to whole percent)
  current wind          5–25 km/h
  current precipitation 0–5 mm, only when humidity > 75 (otherwise 0)
  current UV            1–9
  daily avg temperature 15–35 °C, max = avg + 5, min = avg − 5
  daily humidity        40–90 %  (rounded)
  daily precipitation   0–10 mm, only when humidity > 70 (otherwise 0)
  daily max wind        current wind + 0–10 km/h
"""

from __future__ import annotations

import logging
import random
from datetime import date, timedelta
from typing import Optional

from farmcast.models.weather import (
    MAX_FORECAST_DAYS,
    CurrentReading,
    ForecastDay,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "Demo Farm"


def generate_snapshot(
    seed: int,
    days: int = 7,
    location: str = DEFAULT_LOCATION,
    start_date: Optional[date] = None,
) -> WeatherSnapshot:
    """Generate a deterministic synthetic snapshot.

    Args:
        seed:       RNG seed; equal seeds give equal snapshots.
        days:       Number of forecast days (1–14), day 0 being today.
        location:   Display label stored on the snapshot.
        start_date: Date of forecast day 0.  ``None`` leaves dates unset so
                    the snapshot stays independent of the wall clock.

    Returns:
        A valid ``WeatherSnapshot``.

    Raises:
        ValueError: If ``days`` is outside [1, 14].
    """
    if not 1 <= days <= MAX_FORECAST_DAYS:
        raise ValueError(f"days must be in [1, {MAX_FORECAST_DAYS}], got {days}.")

    rng = random.Random(seed)

    temp = 18 + rng.random() * 15
    humidity = round(45 + rng.random() * 40)
    wind = 5 + rng.random() * 20
    current = CurrentReading(
        temperature_c=round(temp, 1),
        humidity_pct=humidity,
        precipitation_mm=round(rng.random() * 5, 1) if humidity > 75 else 0.0,
        wind_kph=round(wind, 1),
        uv_index=round(rng.random() * 8 + 1),
    )

    forecast: list[ForecastDay] = []
    for i in range(days):
        avg = 15 + rng.random() * 20
        day_humidity = round(40 + rng.random() * 50)
        forecast.append(
            ForecastDay(
                forecast_date=start_date + timedelta(days=i) if start_date else None,
                max_temp_c=round(avg + 5, 1),
                min_temp_c=round(avg - 5, 1),
                avg_temp_c=round(avg, 1),
                total_precip_mm=(
                    round(rng.random() * 10, 1) if day_humidity > 70 else 0.0
                ),
                max_wind_kph=round(wind + rng.random() * 10, 1),
                avg_humidity_pct=day_humidity,
            )
        )

    logger.debug("Synthetic snapshot generated: seed=%d days=%d", seed, days)
    return WeatherSnapshot(current=current, forecast_days=tuple(forecast), location=location)
