"""
Advisory output models: farming conditions, crop alerts, crop recommendations.

All three are value objects rebuilt on every evaluation cycle.  They are
frozen: once the engine has produced them they are handed to presentation
unchanged.  None of them references another; ``AdvisoryReport`` simply
bundles one evaluation's outputs together.

Serialisation: ``model_dump(mode="json")`` yields plain strings for every
enum field, so two evaluations of the same snapshot dump to identical JSON.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from farmcast.taxonomy.condition_taxonomy import (
    AlertSeverity,
    AlertType,
    FieldWorkSuitability,
    GrowingConditions,
    RecommendationPriority,
    RiskLevel,
    SoilMoisture,
)


class FarmingConditions(BaseModel):
    """Categorical summary of the current reading.

    Attributes:
        soil_moisture: dry / optimal / wet.
        growing_conditions: poor / fair / good / excellent.
        pest_risk: low / medium / high.
        disease_risk: low / medium / high.
        irrigation_needed: Whether the crop needs extra water now.
        field_work_suitability: unsuitable / poor / fair / good / excellent.
    """

    model_config = ConfigDict(frozen=True)

    soil_moisture: SoilMoisture
    growing_conditions: GrowingConditions
    pest_risk: RiskLevel
    disease_risk: RiskLevel
    irrigation_needed: bool
    field_work_suitability: FieldWorkSuitability


class CropAlert(BaseModel):
    """A single fired alert rule.

    ``id`` is the slug of the rule that fired (e.g. ``"frost-critical"``); it
    is stable across evaluations and never carries a timestamp.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    crop_type: str
    alert_type: AlertType
    severity: AlertSeverity
    title: str
    description: str
    recommendation: str
    timeframe: str
    weather_condition: str

    @field_validator("id")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        if not v or v != v.lower() or " " in v:
            raise ValueError(f"Alert id must be a lowercase slug, got '{v}'.")
        return v


class CropRecommendation(BaseModel):
    """A crop-care action suggested by one recommendation rule."""

    model_config = ConfigDict(frozen=True)

    crop_type: str
    action: str
    priority: RecommendationPriority
    description: str
    timing: str


class AdvisoryReport(BaseModel):
    """Everything one evaluation of a snapshot produced.

    Attributes:
        location: Copied from the snapshot for display; ``None`` if unknown.
        conditions: Output of the condition classifier.
        recommendations: Recommendations in rule order.
        alerts: Alerts in rule order (current-instant rules first, then the
            48-hour look-ahead rules).
    """

    model_config = ConfigDict(frozen=True)

    location: Optional[str] = None
    conditions: FarmingConditions
    recommendations: tuple[CropRecommendation, ...] = ()
    alerts: tuple[CropAlert, ...] = ()

    @property
    def alert_ids(self) -> list[str]:
        return [a.id for a in self.alerts]

    def highest_severity(self) -> Optional[AlertSeverity]:
        """Return the most urgent alert severity, or ``None`` when no alert fired."""
        if not self.alerts:
            return None
        return max((a.severity for a in self.alerts), key=lambda s: s.rank())
