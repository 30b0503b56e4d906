"""
Categorical vocabulary for farming conditions, alerts and recommendations.

Two groups of enums:
  - Condition ladders: ``SoilMoisture``, ``GrowingConditions``, ``RiskLevel``,
    ``FieldWorkSuitability`` — the categorical fields of ``FarmingConditions``.
  - Output labels: ``AlertType``, ``AlertSeverity``, ``RecommendationPriority``
    — the categorical fields of ``CropAlert`` and ``CropRecommendation``.

Member order is meaningful for the ordered enums (worst → best for the
condition ladders, least → most urgent for severity and priority) and is used
by ``rank()`` for sorting in presentation code.

Usage example::

    from farmcast.taxonomy.condition_taxonomy import AlertSeverity

    AlertSeverity.CRITICAL.rank() > AlertSeverity.HIGH.rank()   # True

This module has NO imports from any other ``farmcast`` package.
"""

from enum import StrEnum


class _Ranked(StrEnum):
    """StrEnum whose declaration order doubles as a rank."""

    def rank(self) -> int:
        return list(type(self)).index(self)


class SoilMoisture(StrEnum):
    """Soil moisture estimate derived from recent rain and humidity."""

    DRY = "dry"
    OPTIMAL = "optimal"
    WET = "wet"


class GrowingConditions(_Ranked):
    """Overall growing suitability from temperature and humidity."""

    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


class RiskLevel(_Ranked):
    """Pest or disease pressure."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class FieldWorkSuitability(_Ranked):
    """How workable the field is for machinery and hand labour today."""

    UNSUITABLE = "unsuitable"
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


class AlertType(StrEnum):
    """Which farm activity an alert concerns."""

    IRRIGATION = "irrigation"
    PEST = "pest"
    DISEASE = "disease"
    HARVEST = "harvest"
    PLANTING = "planting"
    PROTECTION = "protection"


class AlertSeverity(_Ranked):
    """Urgency of a crop alert."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RecommendationPriority(_Ranked):
    """Urgency of a crop-care recommendation."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
