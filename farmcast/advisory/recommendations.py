"""
Crop-care recommendations derived from a snapshot and its classified conditions.

Rule table (emitted in this order, no post-sorting)
----------------------------------------------------
    irrigation          irrigation_needed                         → high
    pest-monitoring     pest_risk == high                         → medium
    disease-prevention  disease_risk == high                      → medium
    planting-time       temp ∈ [15, 25] AND soil == optimal       → high
    harvest             field work excellent AND current precip 0 → high
    frost-protection    tomorrow present AND tomorrow min < 5     → high

Predicates are independent; any subset may fire together.
"""

from __future__ import annotations

from typing import Callable

from farmcast.advisory.rules import Rule, RuleContext, evaluate_rules, in_range
from farmcast.models.advisory import CropRecommendation, FarmingConditions
from farmcast.models.weather import WeatherSnapshot
from farmcast.taxonomy.condition_taxonomy import (
    FieldWorkSuitability,
    RecommendationPriority,
    RiskLevel,
    SoilMoisture,
)

_FROST_PROTECTION_MIN_TEMP_C = 5.0


def _frost_tomorrow(ctx: RuleContext) -> bool:
    tomorrow = ctx.snapshot.tomorrow
    return tomorrow is not None and tomorrow.min_temp_c < _FROST_PROTECTION_MIN_TEMP_C


def _rec(
    crop_type: str,
    action: str,
    priority: RecommendationPriority,
    description: str,
    timing: str,
) -> Callable[[RuleContext], CropRecommendation]:
    return lambda ctx: CropRecommendation(
        crop_type=crop_type,
        action=action,
        priority=priority,
        description=description,
        timing=timing,
    )


RECOMMENDATION_RULES: tuple[Rule[RuleContext, CropRecommendation], ...] = (
    Rule(
        slug="irrigation",
        predicate=lambda ctx: ctx.conditions.irrigation_needed,
        build=_rec(
            "All Crops",
            "Increase Irrigation",
            RecommendationPriority.HIGH,
            "Dry conditions detected. Increase watering frequency to prevent crop stress.",
            "Immediate - Early morning or evening",
        ),
    ),
    Rule(
        slug="pest-monitoring",
        predicate=lambda ctx: ctx.conditions.pest_risk == RiskLevel.HIGH,
        build=_rec(
            "Vegetables & Fruits",
            "Monitor for Pests",
            RecommendationPriority.MEDIUM,
            "High temperature and humidity create favorable conditions for pest activity.",
            "Daily monitoring recommended",
        ),
    ),
    Rule(
        slug="disease-prevention",
        predicate=lambda ctx: ctx.conditions.disease_risk == RiskLevel.HIGH,
        build=_rec(
            "All Crops",
            "Disease Prevention",
            RecommendationPriority.MEDIUM,
            "High humidity increases fungal disease risk. Ensure good air circulation.",
            "Apply preventive treatments now",
        ),
    ),
    Rule(
        slug="planting-time",
        predicate=lambda ctx: (
            in_range(ctx.current.temperature_c, 15, 25)
            and ctx.conditions.soil_moisture == SoilMoisture.OPTIMAL
        ),
        build=_rec(
            "Spring Crops",
            "Optimal Planting Time",
            RecommendationPriority.HIGH,
            "Perfect conditions for planting lettuce, spinach, peas, and other "
            "cool-season crops.",
            "Next 2-3 days",
        ),
    ),
    Rule(
        slug="harvest",
        predicate=lambda ctx: (
            ctx.conditions.field_work_suitability == FieldWorkSuitability.EXCELLENT
            and ctx.current.precipitation_mm == 0
        ),
        build=_rec(
            "Ready Crops",
            "Harvest Operations",
            RecommendationPriority.HIGH,
            "Excellent field conditions for harvesting. Dry weather ensures good "
            "crop quality.",
            "Today and tomorrow",
        ),
    ),
    Rule(
        slug="frost-protection",
        predicate=_frost_tomorrow,
        build=_rec(
            "Sensitive Plants",
            "Frost Protection",
            RecommendationPriority.HIGH,
            "Prepare frost protection measures for temperature-sensitive crops.",
            "Before sunset today",
        ),
    ),
)


def recommend(
    snapshot: WeatherSnapshot,
    conditions: FarmingConditions,
) -> list[CropRecommendation]:
    """Evaluate the recommendation rule table.

    Args:
        snapshot:   Weather snapshot the conditions were derived from.
        conditions: Output of ``classify(snapshot.current)``.

    Returns:
        Fired recommendations in rule order.
    """
    return evaluate_rules(RECOMMENDATION_RULES, RuleContext(snapshot, conditions))
