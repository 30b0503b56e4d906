"""
Crop alerts: severity-ranked warnings from the current reading and a 48-hour
look-ahead over forecast days 1 and 2.

Current-instant rules (read ``current`` + ``conditions`` only)
---------------------------------------------------------------
    drought-severe      soil dry AND temp > 30                  high
    pest-outbreak       pest risk high AND temp > 25            medium
    disease-risk        disease risk high AND humidity > 75     medium
    optimal-planting    growing excellent AND field excellent   low

Look-ahead rules (days 1-2; see ``farmcast.advisory.window``)
--------------------------------------------------------------
    frost-critical      current temp < 2 OR any day min < 2     critical
    frost-warning       any day min ∈ [2, 5]                    high
    heavy-rain          2-day precip > 50                       high
    moderate-rain       25 < 2-day precip <= 50                 medium
    heat-wave           max day max temp > 35                   high
    high-temperature    30 < max day max temp <= 35             medium
    strong-wind         max day max wind > 40                   high
    drought-developing  both days, precip < 2, a day max > 28,
                        mean humidity < 40                      medium
    planting-window     both days, mean temp ∈ [15, 25], mean
                        humidity ∈ [50, 70], max wind < 20,
                        5 < precip < 20                         low
    harvest-window      both days, precip < 1, mean wind < 15   low
    disease-forecast    both days, mean humidity > 80, mean
                        temp > 20, precip > 10                  medium

Every rule runs exactly once per evaluation.  Overlapping rules are not
deduplicated: ``frost-critical`` and ``frost-warning`` fire together when
different days fall in the two bands, and ``drought-severe`` can coexist with
``drought-developing``.
"""

from __future__ import annotations

from typing import Callable

from farmcast.advisory.rules import Rule, RuleContext, evaluate_rules, in_range
from farmcast.models.advisory import CropAlert, FarmingConditions
from farmcast.models.weather import WeatherSnapshot
from farmcast.taxonomy.condition_taxonomy import (
    AlertSeverity,
    AlertType,
    FieldWorkSuitability,
    GrowingConditions,
    RiskLevel,
    SoilMoisture,
)

# Frost bands (°C)
_FROST_CRITICAL_BELOW = 2.0
_FROST_WARNING_BAND = (2.0, 5.0)

# Two-day rainfall totals (mm)
_HEAVY_RAIN_ABOVE = 50.0
_MODERATE_RAIN_ABOVE = 25.0

# Two-day maximum temperature (°C)
_HEAT_WAVE_ABOVE = 35.0
_HIGH_TEMP_ABOVE = 30.0

_STRONG_WIND_ABOVE = 40.0


def _alert(
    slug: str,
    crop_type: str,
    alert_type: AlertType,
    severity: AlertSeverity,
    title: str,
    description: str,
    recommendation: str,
    timeframe: str,
    weather_condition: str,
) -> Callable[[RuleContext], CropAlert]:
    return lambda ctx: CropAlert(
        id=slug,
        crop_type=crop_type,
        alert_type=alert_type,
        severity=severity,
        title=title,
        description=description,
        recommendation=recommendation,
        timeframe=timeframe,
        weather_condition=weather_condition,
    )


def _alert_rule(slug: str, predicate: Callable[[RuleContext], bool], **fields) -> Rule:
    return Rule(slug=slug, predicate=predicate, build=_alert(slug, **fields))


# ── Look-ahead predicates ─────────────────────────────────────────────────────

def _frost_critical(ctx: RuleContext) -> bool:
    return ctx.current.temperature_c < _FROST_CRITICAL_BELOW or ctx.window.any_day(
        lambda d: d.min_temp_c < _FROST_CRITICAL_BELOW
    )


def _frost_warning(ctx: RuleContext) -> bool:
    return ctx.window.any_day(lambda d: in_range(d.min_temp_c, *_FROST_WARNING_BAND))


def _heavy_rain(ctx: RuleContext) -> bool:
    return ctx.window.total_precip_mm > _HEAVY_RAIN_ABOVE


def _moderate_rain(ctx: RuleContext) -> bool:
    return _MODERATE_RAIN_ABOVE < ctx.window.total_precip_mm <= _HEAVY_RAIN_ABOVE


def _heat_wave(ctx: RuleContext) -> bool:
    peak = ctx.window.max_temp_c
    return peak is not None and peak > _HEAT_WAVE_ABOVE


def _high_temperature(ctx: RuleContext) -> bool:
    peak = ctx.window.max_temp_c
    return peak is not None and _HIGH_TEMP_ABOVE < peak <= _HEAT_WAVE_ABOVE


def _strong_wind(ctx: RuleContext) -> bool:
    gust = ctx.window.max_wind_kph
    return gust is not None and gust > _STRONG_WIND_ABOVE


def _drought_developing(ctx: RuleContext) -> bool:
    w = ctx.window
    if not w.complete:
        return False
    return (
        w.total_precip_mm < 2
        and w.any_day(lambda d: d.max_temp_c > 28)
        and w.mean_avg_humidity_pct < 40
    )


def _planting_window(ctx: RuleContext) -> bool:
    w = ctx.window
    if not w.complete:
        return False
    return (
        in_range(w.mean_avg_temp_c, 15, 25)
        and in_range(w.mean_avg_humidity_pct, 50, 70)
        and w.max_wind_kph < 20
        and 5 < w.total_precip_mm < 20
    )


def _harvest_window(ctx: RuleContext) -> bool:
    w = ctx.window
    if not w.complete:
        return False
    return w.total_precip_mm < 1 and w.mean_max_wind_kph < 15


def _disease_forecast(ctx: RuleContext) -> bool:
    w = ctx.window
    if not w.complete:
        return False
    return (
        w.mean_avg_humidity_pct > 80
        and w.mean_avg_temp_c > 20
        and w.total_precip_mm > 10
    )


# ── Rule tables ───────────────────────────────────────────────────────────────

CURRENT_ALERT_RULES: tuple[Rule[RuleContext, CropAlert], ...] = (
    _alert_rule(
        "drought-severe",
        lambda ctx: (
            ctx.conditions.soil_moisture == SoilMoisture.DRY
            and ctx.current.temperature_c > 30
        ),
        crop_type="All Crops",
        alert_type=AlertType.IRRIGATION,
        severity=AlertSeverity.HIGH,
        title="Severe Drought Stress",
        description=(
            "Extremely dry conditions with high temperatures are causing severe "
            "plant stress."
        ),
        recommendation=(
            "Implement emergency irrigation. Apply mulch to conserve moisture. "
            "Consider shade cloth for sensitive crops."
        ),
        timeframe="Immediate action required",
        weather_condition="Hot and dry",
    ),
    _alert_rule(
        "pest-outbreak",
        lambda ctx: (
            ctx.conditions.pest_risk == RiskLevel.HIGH
            and ctx.current.temperature_c > 25
        ),
        crop_type="Vegetables & Fruits",
        alert_type=AlertType.PEST,
        severity=AlertSeverity.MEDIUM,
        title="High Pest Activity Risk",
        description="Warm, humid conditions are ideal for rapid pest reproduction.",
        recommendation=(
            "Inspect crops daily. Apply organic pest control measures. Consider "
            "beneficial insect releases."
        ),
        timeframe="Monitor for next 5-7 days",
        weather_condition="Warm and humid",
    ),
    _alert_rule(
        "disease-risk",
        lambda ctx: (
            ctx.conditions.disease_risk == RiskLevel.HIGH
            and ctx.current.humidity_pct > 75
        ),
        crop_type="All Crops",
        alert_type=AlertType.DISEASE,
        severity=AlertSeverity.MEDIUM,
        title="Fungal Disease Risk",
        description="High humidity creates perfect conditions for fungal diseases.",
        recommendation=(
            "Improve air circulation around plants. Apply preventive fungicide if "
            "needed. Avoid overhead watering."
        ),
        timeframe="Next 3-5 days",
        weather_condition="High humidity",
    ),
    _alert_rule(
        "optimal-planting",
        lambda ctx: (
            ctx.conditions.growing_conditions == GrowingConditions.EXCELLENT
            and ctx.conditions.field_work_suitability == FieldWorkSuitability.EXCELLENT
        ),
        crop_type="Seasonal Crops",
        alert_type=AlertType.PLANTING,
        severity=AlertSeverity.LOW,
        title="Perfect Planting Conditions",
        description="Ideal weather conditions for planting and transplanting.",
        recommendation=(
            "Plant cool-season crops like lettuce, spinach, peas. Transplant "
            "seedlings. Prepare soil for upcoming plantings."
        ),
        timeframe="Next 2-3 days",
        weather_condition="Mild and optimal",
    ),
)

LOOK_AHEAD_ALERT_RULES: tuple[Rule[RuleContext, CropAlert], ...] = (
    _alert_rule(
        "frost-critical",
        _frost_critical,
        crop_type="All Sensitive Crops",
        alert_type=AlertType.PROTECTION,
        severity=AlertSeverity.CRITICAL,
        title="Critical Frost Warning",
        description="Temperatures below 2°C will damage or kill most crops.",
        recommendation=(
            "Immediately cover crops with frost cloth, use heaters, or harvest what "
            "you can. Move potted plants indoors."
        ),
        timeframe="Next 48 hours",
        weather_condition="Freezing temperatures",
    ),
    _alert_rule(
        "frost-warning",
        _frost_warning,
        crop_type="Frost-Sensitive Crops",
        alert_type=AlertType.PROTECTION,
        severity=AlertSeverity.HIGH,
        title="Frost Warning",
        description=(
            "Night temperatures between 2°C and 5°C may damage tender plants and "
            "young seedlings."
        ),
        recommendation=(
            "Cover sensitive plants with frost cloth before sunset. Water soil "
            "during the day to retain heat. Delay transplanting."
        ),
        timeframe="Next 48 hours",
        weather_condition="Near-freezing nights",
    ),
    _alert_rule(
        "heavy-rain",
        _heavy_rain,
        crop_type="All Crops",
        alert_type=AlertType.PROTECTION,
        severity=AlertSeverity.HIGH,
        title="Heavy Rainfall Expected",
        description=(
            "More than 50mm of rain is forecast over the next two days. Expect "
            "waterlogging and soil erosion."
        ),
        recommendation=(
            "Clear drainage channels. Postpone fertilizer and pesticide "
            "applications. Harvest ripe crops before the rain."
        ),
        timeframe="Next 48 hours",
        weather_condition="Heavy rain",
    ),
    _alert_rule(
        "moderate-rain",
        _moderate_rain,
        crop_type="All Crops",
        alert_type=AlertType.IRRIGATION,
        severity=AlertSeverity.MEDIUM,
        title="Moderate Rainfall Expected",
        description="Between 25mm and 50mm of rain is forecast over the next two days.",
        recommendation=(
            "Reduce or pause irrigation. Check field drainage. Avoid spraying "
            "before the rain."
        ),
        timeframe="Next 48 hours",
        weather_condition="Rain",
    ),
    _alert_rule(
        "heat-wave",
        _heat_wave,
        crop_type="All Crops",
        alert_type=AlertType.PROTECTION,
        severity=AlertSeverity.HIGH,
        title="Heat Wave Warning",
        description=(
            "Temperatures above 35°C are forecast. Heat stress reduces flowering "
            "and fruit set."
        ),
        recommendation=(
            "Irrigate early in the morning. Provide shade for sensitive crops. "
            "Avoid field work during the hottest hours."
        ),
        timeframe="Next 48 hours",
        weather_condition="Extreme heat",
    ),
    _alert_rule(
        "high-temperature",
        _high_temperature,
        crop_type="Heat-Sensitive Crops",
        alert_type=AlertType.IRRIGATION,
        severity=AlertSeverity.MEDIUM,
        title="High Temperature Advisory",
        description="Temperatures above 30°C are forecast over the next two days.",
        recommendation=(
            "Increase irrigation frequency. Mulch to keep soil cool. Monitor "
            "plants for wilting."
        ),
        timeframe="Next 48 hours",
        weather_condition="Hot",
    ),
    _alert_rule(
        "strong-wind",
        _strong_wind,
        crop_type="Tall & Staked Crops",
        alert_type=AlertType.PROTECTION,
        severity=AlertSeverity.HIGH,
        title="Strong Wind Warning",
        description=(
            "Winds above 40 km/h may flatten crops and damage greenhouses and farm "
            "structures."
        ),
        recommendation=(
            "Secure loose equipment and materials. Stake tall plants. Reinforce "
            "greenhouse structures. Do not spray."
        ),
        timeframe="Next 48 hours",
        weather_condition="Strong wind",
    ),
    _alert_rule(
        "drought-developing",
        _drought_developing,
        crop_type="All Crops",
        alert_type=AlertType.IRRIGATION,
        severity=AlertSeverity.MEDIUM,
        title="Drought Conditions Developing",
        description=(
            "Hot, dry weather with little rain is forecast. Soil moisture will "
            "drop quickly."
        ),
        recommendation=(
            "Plan additional irrigation. Apply mulch to retain soil moisture. "
            "Monitor plants for signs of water stress."
        ),
        timeframe="Next 48 hours",
        weather_condition="Hot and dry",
    ),
    _alert_rule(
        "planting-window",
        _planting_window,
        crop_type="Seasonal Crops",
        alert_type=AlertType.PLANTING,
        severity=AlertSeverity.LOW,
        title="Good Planting Window Ahead",
        description=(
            "Mild temperatures, moderate humidity and light rain are forecast for "
            "the next two days."
        ),
        recommendation=(
            "Prepare seedbeds and schedule sowing or transplanting for the coming "
            "days."
        ),
        timeframe="Next 2 days",
        weather_condition="Mild with light rain",
    ),
    _alert_rule(
        "harvest-window",
        _harvest_window,
        crop_type="Ready Crops",
        alert_type=AlertType.HARVEST,
        severity=AlertSeverity.LOW,
        title="Harvest Opportunity",
        description="Dry, calm weather is forecast for the next two days.",
        recommendation=(
            "Schedule harvesting of mature crops. Dry weather helps crop quality "
            "and storage."
        ),
        timeframe="Next 2 days",
        weather_condition="Dry and calm",
    ),
    _alert_rule(
        "disease-forecast",
        _disease_forecast,
        crop_type="All Crops",
        alert_type=AlertType.DISEASE,
        severity=AlertSeverity.MEDIUM,
        title="Disease Risk Forecast",
        description=(
            "Warm, very humid and wet weather is forecast, favoring fungal and "
            "bacterial diseases."
        ),
        recommendation=(
            "Apply preventive fungicide before the rain. Improve drainage and "
            "air circulation. Scout crops after the wet spell."
        ),
        timeframe="Next 48 hours",
        weather_condition="Warm and wet",
    ),
)

ALERT_RULES: tuple[Rule[RuleContext, CropAlert], ...] = (
    CURRENT_ALERT_RULES + LOOK_AHEAD_ALERT_RULES
)


def generate_alerts(
    snapshot: WeatherSnapshot,
    conditions: FarmingConditions,
) -> list[CropAlert]:
    """Evaluate every alert rule against the snapshot.

    Args:
        snapshot:   Weather snapshot; any number of forecast days.
        conditions: Output of ``classify(snapshot.current)``.

    Returns:
        Fired alerts in rule order: current-instant rules, then look-ahead.
    """
    return evaluate_rules(ALERT_RULES, RuleContext(snapshot, conditions))
