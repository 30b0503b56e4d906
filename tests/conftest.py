"""
Shared pytest fixtures for the FarmCast test suite.

Provides:
  - Snapshot factories (``make_current``, ``make_day``, ``make_snapshot``)
    exposed as fixtures so test modules can build edge cases inline.
  - ``mild_snapshot``: temperate, calm, dry-weather snapshot whose look-ahead
    days trigger no alert on their own.
  - ``weatherapi_payload``: a trimmed weatherapi.com ``forecast.json`` dict.
"""

from __future__ import annotations

from typing import Callable

import pytest

from farmcast.models.weather import CurrentReading, ForecastDay, WeatherSnapshot


def _current(
    temperature_c: float = 20.0,
    humidity_pct: float = 60.0,
    precipitation_mm: float = 0.0,
    wind_kph: float = 5.0,
    uv_index: float = 4.0,
) -> CurrentReading:
    return CurrentReading(
        temperature_c=temperature_c,
        humidity_pct=humidity_pct,
        precipitation_mm=precipitation_mm,
        wind_kph=wind_kph,
        uv_index=uv_index,
    )


def _day(
    avg_temp_c: float = 18.0,
    max_temp_c: float | None = None,
    min_temp_c: float | None = None,
    total_precip_mm: float = 3.0,
    max_wind_kph: float = 10.0,
    avg_humidity_pct: float = 45.0,
) -> ForecastDay:
    # Defaults are "quiet": no look-ahead rule fires on two of these days.
    return ForecastDay(
        max_temp_c=avg_temp_c + 4 if max_temp_c is None else max_temp_c,
        min_temp_c=avg_temp_c - 4 if min_temp_c is None else min_temp_c,
        avg_temp_c=avg_temp_c,
        total_precip_mm=total_precip_mm,
        max_wind_kph=max_wind_kph,
        avg_humidity_pct=avg_humidity_pct,
    )


def _snapshot(
    current: CurrentReading | None = None,
    tomorrow: ForecastDay | None = None,
    day_after: ForecastDay | None = None,
    days: int = 3,
    location: str | None = "Test Farm",
) -> WeatherSnapshot:
    """Build a snapshot with ``days`` forecast days; day 1 / 2 may be overridden."""
    forecast = [_day() for _ in range(days)]
    if tomorrow is not None and days > 1:
        forecast[1] = tomorrow
    if day_after is not None and days > 2:
        forecast[2] = day_after
    return WeatherSnapshot(
        current=current or _current(),
        forecast_days=tuple(forecast),
        location=location,
    )


@pytest.fixture
def make_current() -> Callable[..., CurrentReading]:
    return _current


@pytest.fixture
def make_day() -> Callable[..., ForecastDay]:
    return _day


@pytest.fixture
def make_snapshot() -> Callable[..., WeatherSnapshot]:
    return _snapshot


@pytest.fixture
def mild_snapshot() -> WeatherSnapshot:
    """20 °C, 65 % humidity, no rain, 5 km/h wind; quiet forecast days."""
    return _snapshot(current=_current(temperature_c=20.0, humidity_pct=65.0))


@pytest.fixture
def weatherapi_payload() -> dict:
    """Trimmed weatherapi.com forecast.json response with three days."""

    def _fday(date: str, maxt: float, mint: float, avgt: float,
              precip: float, wind: float, hum: int) -> dict:
        return {
            "date": date,
            "date_epoch": 0,
            "day": {
                "maxtemp_c": maxt, "maxtemp_f": maxt * 9 / 5 + 32,
                "mintemp_c": mint, "mintemp_f": mint * 9 / 5 + 32,
                "avgtemp_c": avgt, "avgtemp_f": avgt * 9 / 5 + 32,
                "maxwind_mph": wind * 0.621371, "maxwind_kph": wind,
                "totalprecip_mm": precip, "totalprecip_in": 0.0,
                "avghumidity": hum,
                "daily_chance_of_rain": 10,
                "condition": {"text": "Sunny", "icon": "", "code": 1000},
                "uv": 5,
            },
            "astro": {"sunrise": "06:15 AM", "sunset": "07:45 PM"},
            "hour": [],
        }

    return {
        "location": {
            "name": "Fresno", "region": "California", "country": "USA",
            "lat": 36.74, "lon": -119.79, "localtime": "2026-10-19 09:00",
        },
        "current": {
            "temp_c": 21.0, "temp_f": 69.8,
            "condition": {"text": "Sunny", "icon": "", "code": 1000},
            "wind_mph": 3.1, "wind_kph": 5.0, "wind_dir": "SW",
            "pressure_mb": 1013.0, "precip_mm": 0.0, "precip_in": 0.0,
            "humidity": 65, "cloud": 15, "feelslike_c": 21.0,
            "vis_km": 16.0, "uv": 6.0, "gust_kph": 7.5,
        },
        "forecast": {
            "forecastday": [
                _fday("2026-10-19", 26.0, 12.0, 19.0, 0.0, 12.0, 55),
                _fday("2026-10-20", 24.0, 1.0, 14.0, 30.0, 18.0, 70),
                _fday("2026-10-21", 22.0, 3.0, 13.0, 30.0, 45.0, 75),
            ]
        },
        "alerts": {"alert": []},
    }
