"""
Tests for farmcast/advisory/engine.py — end-to-end evaluation of a snapshot.
"""

from __future__ import annotations

import logging

from farmcast.advisory.engine import evaluate
from farmcast.taxonomy.condition_taxonomy import (
    AlertSeverity,
    FieldWorkSuitability,
    GrowingConditions,
    RiskLevel,
    SoilMoisture,
)


class TestEvaluate:
    def test_mild_snapshot_report(self, mild_snapshot):
        report = evaluate(mild_snapshot)
        assert report.location == "Test Farm"
        assert report.conditions.growing_conditions == GrowingConditions.EXCELLENT
        assert [r.action for r in report.recommendations] == [
            "Optimal Planting Time", "Harvest Operations",
        ]
        assert report.alert_ids == ["optimal-planting"]
        assert report.highest_severity() == AlertSeverity.LOW

    def test_21c_65pct_reading(self, make_snapshot, make_current):
        # 21 °C / 65 % lands on the "pest risk high" side of the ladder
        # (temp > 20 AND humidity > 60), so pest monitoring joins
        # planting + harvest.
        snap = make_snapshot(current=make_current(temperature_c=21.0, humidity_pct=65.0))
        report = evaluate(snap)
        c = report.conditions
        assert c.soil_moisture == SoilMoisture.OPTIMAL
        assert c.growing_conditions == GrowingConditions.EXCELLENT
        assert c.field_work_suitability == FieldWorkSuitability.EXCELLENT
        assert c.pest_risk == RiskLevel.HIGH
        actions = [r.action for r in report.recommendations]
        assert actions == ["Monitor for Pests", "Optimal Planting Time", "Harvest Operations"]
        assert "Increase Irrigation" not in actions
        assert "Disease Prevention" not in actions

    def test_no_forecast_days(self, make_snapshot, make_current):
        snap = make_snapshot(current=make_current(temperature_c=1.5, humidity_pct=45.0), days=0)
        report = evaluate(snap)
        assert report.alert_ids == ["frost-critical"]
        assert report.highest_severity() == AlertSeverity.CRITICAL
        # Dry and calm, so field work stays excellent and harvest still fires.
        assert [r.action for r in report.recommendations] == ["Harvest Operations"]

    def test_idempotent(self, make_snapshot, make_current, make_day):
        snap = make_snapshot(
            current=make_current(temperature_c=32.0, humidity_pct=30.0),
            tomorrow=make_day(min_temp_c=1.0, total_precip_mm=30.0),
            day_after=make_day(max_temp_c=36.0, total_precip_mm=30.0),
        )
        assert evaluate(snap).model_dump_json() == evaluate(snap).model_dump_json()

    def test_does_not_mutate_snapshot(self, mild_snapshot):
        before = mild_snapshot.model_dump_json()
        evaluate(mild_snapshot)
        assert mild_snapshot.model_dump_json() == before

    def test_logs_summary(self, mild_snapshot, caplog):
        with caplog.at_level(logging.INFO, logger="farmcast.advisory.engine"):
            evaluate(mild_snapshot)
        assert "Advisory evaluated for Test Farm" in caplog.text
        assert "optimal-planting" in caplog.text

    def test_unnamed_location(self, make_snapshot, caplog):
        snap = make_snapshot(location=None)
        with caplog.at_level(logging.INFO, logger="farmcast.advisory.engine"):
            report = evaluate(snap)
        assert report.location is None
        assert "unnamed location" in caplog.text
