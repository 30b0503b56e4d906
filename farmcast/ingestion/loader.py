"""
Snapshot loader — turn a weather JSON payload on disk into a ``WeatherSnapshot``.

Two payload shapes are accepted:

  Provider shape (weatherapi.com ``forecast.json``)::

    {
      "location": {"name": "Fresno", ...},
      "current":  {"temp_c": 21.0, "humidity": 65, "precip_mm": 0.0,
                   "wind_kph": 5.0, "uv": 6.0, ...},
      "forecast": {"forecastday": [
          {"date": "2026-10-19",
           "day": {"maxtemp_c": 26.0, "mintemp_c": 12.0, "avgtemp_c": 19.0,
                   "totalprecip_mm": 0.0, "maxwind_kph": 12.0,
                   "avghumidity": 55, ...}},
          ...
      ]}
    }

  Normalized shape (``WeatherSnapshot.model_dump(mode="json")``)::

    {"location": "...", "current": {...}, "forecast_days": [{...}, ...]}

Either shape may be wrapped in a ``{"_meta": {...}, "data": {...}}``
envelope; the envelope is unwrapped first.

Errors
------
  FileNotFoundError         — path does not exist.
  SnapshotFormatError       — not UTF-8 JSON, or a required key is missing.
  pydantic.ValidationError  — values fail model validation (e.g. humidity 120).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from farmcast.models.weather import CurrentReading, ForecastDay, WeatherSnapshot

logger = logging.getLogger(__name__)


class SnapshotFormatError(ValueError):
    """Raised when a payload does not match any supported snapshot shape."""


def load_snapshot(path: Path) -> WeatherSnapshot:
    """Read a JSON file and build a ``WeatherSnapshot`` from it.

    Args:
        path: Path to a provider or normalized snapshot JSON file.

    Returns:
        Validated ``WeatherSnapshot``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        SnapshotFormatError: If the file is not JSON or lacks required keys.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SnapshotFormatError(f"{path} is not valid JSON: {exc}") from exc

    snapshot = snapshot_from_payload(payload)
    logger.debug(
        "Snapshot loaded: %s | location=%s | forecast_days=%d",
        path.name, snapshot.location, len(snapshot.forecast_days),
    )
    return snapshot


def snapshot_from_payload(payload: Any) -> WeatherSnapshot:
    """Dispatch a decoded payload to the matching shape parser."""
    if not isinstance(payload, dict):
        raise SnapshotFormatError(
            f"Snapshot payload must be a JSON object, got {type(payload).__name__}."
        )
    if "_meta" in payload and isinstance(payload.get("data"), dict):
        payload = payload["data"]

    if isinstance(payload.get("forecast"), dict) and "forecastday" in payload["forecast"]:
        return snapshot_from_weatherapi(payload)
    if "current" in payload and "forecast_days" in payload:
        return WeatherSnapshot.model_validate(payload)
    raise SnapshotFormatError(
        "Unrecognised snapshot payload: expected 'forecast.forecastday' "
        "(provider shape) or 'forecast_days' (normalized shape)."
    )


def snapshot_from_weatherapi(payload: dict[str, Any]) -> WeatherSnapshot:
    """Map a weatherapi.com ``forecast.json`` response to a ``WeatherSnapshot``.

    Only the fields the advisory engine reads are kept; everything else
    (imperial units, astro data, hourly breakdown, provider alerts) is dropped.
    """
    current_raw = _require(payload, "current", "payload")
    forecast_raw = _require(payload, "forecast", "payload")
    days_raw = _require(forecast_raw, "forecastday", "forecast")

    current = CurrentReading(
        temperature_c=_require(current_raw, "temp_c", "current"),
        humidity_pct=_require(current_raw, "humidity", "current"),
        precipitation_mm=_require(current_raw, "precip_mm", "current"),
        wind_kph=_require(current_raw, "wind_kph", "current"),
        uv_index=current_raw.get("uv", 0.0),
    )

    days: list[ForecastDay] = []
    for i, entry in enumerate(days_raw):
        day = _require(entry, "day", f"forecastday[{i}]")
        where = f"forecastday[{i}].day"
        days.append(
            ForecastDay(
                forecast_date=entry.get("date"),
                max_temp_c=_require(day, "maxtemp_c", where),
                min_temp_c=_require(day, "mintemp_c", where),
                avg_temp_c=_require(day, "avgtemp_c", where),
                total_precip_mm=_require(day, "totalprecip_mm", where),
                max_wind_kph=_require(day, "maxwind_kph", where),
                avg_humidity_pct=_require(day, "avghumidity", where),
            )
        )

    location = payload.get("location") or {}
    return WeatherSnapshot(
        current=current,
        forecast_days=tuple(days),
        location=location.get("name") if isinstance(location, dict) else None,
    )


def _require(obj: Any, key: str, where: str) -> Any:
    if not isinstance(obj, dict) or key not in obj:
        raise SnapshotFormatError(f"Missing required key '{key}' in {where}.")
    return obj[key]
