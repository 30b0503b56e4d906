"""
Condition classifier: maps the current reading to a ``FarmingConditions``.

Each field is a total ladder evaluated top to bottom; first match wins.
Interval bounds written as ``[lo, hi]`` below are inclusive.

    soil_moisture
        precip > 5  OR humidity > 80          → wet
        precip < 1  AND humidity < 40         → dry
        otherwise                             → optimal

    growing_conditions
        temp ∈ [15, 25] AND humidity ∈ [50, 70] → excellent
        temp ∈ [10, 30] AND humidity ∈ [40, 80] → good
        temp ∈ [5, 35]                          → fair
        otherwise                               → poor

    pest_risk
        temp > 20 AND humidity > 60           → high
        temp > 15 AND humidity > 50           → medium
        otherwise                             → low

    disease_risk
        humidity > 70 AND temp > 15           → high
        humidity > 60                         → medium
        otherwise                             → low

    irrigation_needed
        soil == dry  OR (temp > 25 AND humidity < 50)

    field_work_suitability
        precip > 10 OR wind > 30              → unsuitable
        precip > 5  OR wind > 20 OR soil wet  → poor
        precip > 2  OR wind > 15              → fair
        wind < 10   AND soil optimal          → excellent
        otherwise                             → good
"""

from __future__ import annotations

from typing import Union

from farmcast.advisory.rules import in_range
from farmcast.models.advisory import FarmingConditions
from farmcast.models.weather import CurrentReading, WeatherSnapshot
from farmcast.taxonomy.condition_taxonomy import (
    FieldWorkSuitability,
    GrowingConditions,
    RiskLevel,
    SoilMoisture,
)


def classify(reading: Union[CurrentReading, WeatherSnapshot]) -> FarmingConditions:
    """Classify the current reading into categorical farming conditions.

    Args:
        reading: A ``CurrentReading``, or a ``WeatherSnapshot`` whose
            ``current`` reading is used.

    Returns:
        A fresh, frozen ``FarmingConditions``.
    """
    current = reading.current if isinstance(reading, WeatherSnapshot) else reading
    temp = current.temperature_c
    humidity = current.humidity_pct
    precip = current.precipitation_mm
    wind = current.wind_kph

    soil = soil_moisture(precip, humidity)
    return FarmingConditions(
        soil_moisture=soil,
        growing_conditions=growing_conditions(temp, humidity),
        pest_risk=pest_risk(temp, humidity),
        disease_risk=disease_risk(temp, humidity),
        irrigation_needed=irrigation_needed(temp, humidity, soil),
        field_work_suitability=field_work_suitability(precip, wind, soil),
    )


def soil_moisture(precip: float, humidity: float) -> SoilMoisture:
    if precip > 5 or humidity > 80:
        return SoilMoisture.WET
    if precip < 1 and humidity < 40:
        return SoilMoisture.DRY
    return SoilMoisture.OPTIMAL


def growing_conditions(temp: float, humidity: float) -> GrowingConditions:
    if in_range(temp, 15, 25) and in_range(humidity, 50, 70):
        return GrowingConditions.EXCELLENT
    if in_range(temp, 10, 30) and in_range(humidity, 40, 80):
        return GrowingConditions.GOOD
    if in_range(temp, 5, 35):
        return GrowingConditions.FAIR
    return GrowingConditions.POOR


def pest_risk(temp: float, humidity: float) -> RiskLevel:
    if temp > 20 and humidity > 60:
        return RiskLevel.HIGH
    if temp > 15 and humidity > 50:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def disease_risk(temp: float, humidity: float) -> RiskLevel:
    if humidity > 70 and temp > 15:
        return RiskLevel.HIGH
    if humidity > 60:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def irrigation_needed(temp: float, humidity: float, soil: SoilMoisture) -> bool:
    return soil == SoilMoisture.DRY or (temp > 25 and humidity < 50)


def field_work_suitability(
    precip: float, wind: float, soil: SoilMoisture
) -> FieldWorkSuitability:
    if precip > 10 or wind > 30:
        return FieldWorkSuitability.UNSUITABLE
    if precip > 5 or wind > 20 or soil == SoilMoisture.WET:
        return FieldWorkSuitability.POOR
    if precip > 2 or wind > 15:
        return FieldWorkSuitability.FAIR
    if wind < 10 and soil == SoilMoisture.OPTIMAL:
        return FieldWorkSuitability.EXCELLENT
    return FieldWorkSuitability.GOOD
