"""
Tests for farmcast/advisory/alerts.py.

What we test
------------
Current-instant rules:
  - drought-severe, pest-outbreak, disease-risk, optimal-planting.
Look-ahead rules:
  - Frost bands may coexist; current temp alone triggers frost-critical.
  - Rain and heat ladders are mutually exclusive at their boundaries.
  - Rules needing both days stay silent on a partial window.
  - A missing day never reads as "0 mm, therefore dry".
Ordering:
  - Current-instant rules first, then look-ahead, each in table order.

Most tests use ``quiet``, a current reading that trips no current-instant
rule, so the look-ahead output can be asserted exactly.
"""

from __future__ import annotations

import pytest

from farmcast.advisory.alerts import (
    ALERT_RULES,
    CURRENT_ALERT_RULES,
    LOOK_AHEAD_ALERT_RULES,
    generate_alerts,
)
from farmcast.advisory.classifier import classify
from farmcast.taxonomy.condition_taxonomy import AlertSeverity, AlertType


def _alerts(snapshot):
    return generate_alerts(snapshot, classify(snapshot))


def _ids(snapshot) -> list[str]:
    return [a.id for a in _alerts(snapshot)]


@pytest.fixture
def quiet(make_current):
    """20 °C, 45 % humidity: growing 'good', no risk, no current-instant alert."""
    return make_current(temperature_c=20.0, humidity_pct=45.0)


# ── Rule tables ───────────────────────────────────────────────────────────────

class TestRuleTables:
    def test_current_rules_order(self):
        assert [r.slug for r in CURRENT_ALERT_RULES] == [
            "drought-severe", "pest-outbreak", "disease-risk", "optimal-planting",
        ]

    def test_look_ahead_rules_order(self):
        assert [r.slug for r in LOOK_AHEAD_ALERT_RULES] == [
            "frost-critical", "frost-warning", "heavy-rain", "moderate-rain",
            "heat-wave", "high-temperature", "strong-wind", "drought-developing",
            "planting-window", "harvest-window", "disease-forecast",
        ]

    def test_each_rule_runs_once(self):
        slugs = [r.slug for r in ALERT_RULES]
        assert len(slugs) == len(set(slugs)) == 15

    def test_quiet_baseline_fires_nothing(self, make_snapshot, quiet):
        assert _ids(make_snapshot(current=quiet)) == []


# ── Current-instant rules ─────────────────────────────────────────────────────

class TestCurrentInstant:
    def test_drought_severe(self, make_snapshot, make_current):
        snap = make_snapshot(current=make_current(temperature_c=32.0, humidity_pct=30.0))
        alerts = _alerts(snap)
        assert [a.id for a in alerts] == ["drought-severe"]
        assert alerts[0].severity == AlertSeverity.HIGH
        assert alerts[0].alert_type == AlertType.IRRIGATION

    def test_drought_severe_needs_temp_above_30(self, make_snapshot, make_current):
        snap = make_snapshot(current=make_current(temperature_c=30.0, humidity_pct=30.0))
        assert "drought-severe" not in _ids(snap)

    def test_pest_outbreak(self, make_snapshot, make_current):
        # 26 °C / 65 %: pest high, disease medium.
        snap = make_snapshot(current=make_current(temperature_c=26.0, humidity_pct=65.0))
        assert _ids(snap) == ["pest-outbreak"]

    def test_high_pest_risk_at_25_is_not_an_outbreak(self, make_snapshot, make_current):
        snap = make_snapshot(current=make_current(temperature_c=25.0, humidity_pct=65.0))
        assert "pest-outbreak" not in _ids(snap)

    def test_disease_risk(self, make_snapshot, make_current):
        snap = make_snapshot(current=make_current(temperature_c=18.0, humidity_pct=76.0))
        alert = _alerts(snap)[0]
        assert alert.id == "disease-risk"
        assert alert.severity == AlertSeverity.MEDIUM
        assert alert.alert_type == AlertType.DISEASE

    def test_disease_risk_needs_humidity_above_75(self, make_snapshot, make_current):
        snap = make_snapshot(current=make_current(temperature_c=18.0, humidity_pct=75.0))
        assert "disease-risk" not in _ids(snap)

    def test_optimal_planting(self, mild_snapshot):
        alerts = _alerts(mild_snapshot)
        assert [a.id for a in alerts] == ["optimal-planting"]
        assert alerts[0].severity == AlertSeverity.LOW


# ── Frost ─────────────────────────────────────────────────────────────────────

class TestFrost:
    def test_current_temp_alone_with_no_forecast(self, make_snapshot, make_current):
        snap = make_snapshot(current=make_current(temperature_c=1.5, humidity_pct=45.0), days=0)
        alerts = _alerts(snap)
        assert [a.id for a in alerts] == ["frost-critical"]
        assert alerts[0].severity == AlertSeverity.CRITICAL

    def test_critical_and_warning_coexist(self, make_snapshot, make_day, quiet):
        snap = make_snapshot(
            current=quiet,
            tomorrow=make_day(min_temp_c=1.0),
            day_after=make_day(min_temp_c=3.0),
        )
        assert _ids(snap) == ["frost-critical", "frost-warning"]

    def test_warning_band_is_closed(self, make_snapshot, make_day, quiet):
        assert _ids(make_snapshot(current=quiet, day_after=make_day(min_temp_c=5.0))) == ["frost-warning"]
        assert _ids(make_snapshot(current=quiet, day_after=make_day(min_temp_c=2.0))) == ["frost-warning"]

    def test_above_band_no_frost(self, make_snapshot, make_day, quiet):
        assert _ids(make_snapshot(current=quiet, tomorrow=make_day(min_temp_c=5.1))) == []

    def test_today_min_is_not_look_ahead(self, make_snapshot, make_day, quiet):
        snap = make_snapshot(current=quiet)
        cold_today = snap.model_copy(
            update={"forecast_days": (make_day(min_temp_c=-5.0),) + snap.forecast_days[1:]}
        )
        assert _ids(cold_today) == []


# ── Rain ──────────────────────────────────────────────────────────────────────

class TestRain:
    def _rain(self, make_snapshot, make_day, quiet, tomorrow, day_after):
        return make_snapshot(
            current=quiet,
            tomorrow=make_day(total_precip_mm=tomorrow),
            day_after=make_day(total_precip_mm=day_after),
        )

    def test_heavy_excludes_moderate(self, make_snapshot, make_day, quiet):
        alerts = _alerts(self._rain(make_snapshot, make_day, quiet, 30.0, 30.0))
        assert [a.id for a in alerts] == ["heavy-rain"]
        assert alerts[0].severity == AlertSeverity.HIGH

    def test_moderate(self, make_snapshot, make_day, quiet):
        alerts = _alerts(self._rain(make_snapshot, make_day, quiet, 20.0, 10.0))
        assert [a.id for a in alerts] == ["moderate-rain"]
        assert alerts[0].severity == AlertSeverity.MEDIUM

    def test_exactly_50_is_moderate(self, make_snapshot, make_day, quiet):
        assert _ids(self._rain(make_snapshot, make_day, quiet, 25.0, 25.0)) == ["moderate-rain"]

    def test_exactly_25_is_no_alert(self, make_snapshot, make_day, quiet):
        assert _ids(self._rain(make_snapshot, make_day, quiet, 12.5, 12.5)) == []

    def test_partial_window_counts_present_day(self, make_snapshot, make_day, quiet):
        snap = make_snapshot(current=quiet, tomorrow=make_day(total_precip_mm=30.0), days=2)
        assert _ids(snap) == ["moderate-rain"]


# ── Heat and wind ─────────────────────────────────────────────────────────────

class TestHeatAndWind:
    @pytest.mark.parametrize("peak,expected", [
        (36.0, ["heat-wave"]),
        (35.0, ["high-temperature"]),
        (30.5, ["high-temperature"]),
        (30.0, []),
    ])
    def test_heat_ladder(self, make_snapshot, make_day, quiet, peak, expected):
        snap = make_snapshot(current=quiet, day_after=make_day(max_temp_c=peak))
        assert _ids(snap) == expected

    def test_strong_wind(self, make_snapshot, make_day, quiet):
        alerts = _alerts(make_snapshot(current=quiet, tomorrow=make_day(max_wind_kph=41.0)))
        assert [a.id for a in alerts] == ["strong-wind"]
        assert alerts[0].severity == AlertSeverity.HIGH

    def test_wind_exactly_40_no_alert(self, make_snapshot, make_day, quiet):
        assert _ids(make_snapshot(current=quiet, tomorrow=make_day(max_wind_kph=40.0))) == []


# ── Windows that need both days ───────────────────────────────────────────────

class TestTwoDayWindows:
    def _dry_hot_day(self, make_day):
        return make_day(
            avg_temp_c=25.0, max_temp_c=29.0, total_precip_mm=0.0,
            max_wind_kph=16.0, avg_humidity_pct=30.0,
        )

    def test_drought_severe_and_developing_coexist(self, make_snapshot, make_current, make_day):
        snap = make_snapshot(
            current=make_current(temperature_c=32.0, humidity_pct=30.0),
            tomorrow=self._dry_hot_day(make_day),
            day_after=self._dry_hot_day(make_day),
        )
        assert _ids(snap) == ["drought-severe", "drought-developing"]

    def test_missing_day_never_counts_as_dry(self, make_snapshot, make_current, make_day):
        snap = make_snapshot(
            current=make_current(temperature_c=32.0, humidity_pct=30.0),
            tomorrow=self._dry_hot_day(make_day),
            days=2,
        )
        assert _ids(snap) == ["drought-severe"]

    def test_planting_window(self, make_snapshot, make_day, quiet):
        day = make_day(avg_temp_c=20.0, total_precip_mm=4.0, max_wind_kph=10.0, avg_humidity_pct=60.0)
        alerts = _alerts(make_snapshot(current=quiet, tomorrow=day, day_after=day))
        assert [a.id for a in alerts] == ["planting-window"]
        assert alerts[0].alert_type == AlertType.PLANTING

    def test_planting_window_rain_bounds_are_open(self, make_snapshot, make_day, quiet):
        day = make_day(avg_temp_c=20.0, total_precip_mm=2.5, max_wind_kph=10.0, avg_humidity_pct=60.0)
        assert _ids(make_snapshot(current=quiet, tomorrow=day, day_after=day)) == []

    def test_harvest_window(self, make_snapshot, make_day, quiet):
        snap = make_snapshot(
            current=quiet,
            tomorrow=make_day(total_precip_mm=0.0, max_wind_kph=10.0),
            day_after=make_day(total_precip_mm=0.0, max_wind_kph=12.0),
        )
        alerts = _alerts(snap)
        assert [a.id for a in alerts] == ["harvest-window"]
        assert alerts[0].alert_type == AlertType.HARVEST

    def test_harvest_window_needs_mean_wind_below_15(self, make_snapshot, make_day, quiet):
        day = make_day(total_precip_mm=0.0, max_wind_kph=15.0)
        assert _ids(make_snapshot(current=quiet, tomorrow=day, day_after=day)) == []

    def test_harvest_window_not_on_partial_window(self, make_snapshot, make_day, quiet):
        snap = make_snapshot(current=quiet, tomorrow=make_day(total_precip_mm=0.0), days=2)
        assert _ids(snap) == []

    def test_disease_forecast(self, make_snapshot, make_day, quiet):
        day = make_day(avg_temp_c=22.0, total_precip_mm=6.0, avg_humidity_pct=85.0)
        alerts = _alerts(make_snapshot(current=quiet, tomorrow=day, day_after=day))
        assert [a.id for a in alerts] == ["disease-forecast"]
        assert alerts[0].severity == AlertSeverity.MEDIUM


# ── Ordering, short forecasts, idempotence ────────────────────────────────────

class TestGenerateAlerts:
    def test_current_rules_before_look_ahead(self, make_snapshot, make_current, make_day):
        stormy = make_day(max_temp_c=36.0, min_temp_c=1.0, total_precip_mm=30.0, max_wind_kph=45.0)
        snap = make_snapshot(
            current=make_current(temperature_c=32.0, humidity_pct=30.0),
            tomorrow=stormy,
            day_after=stormy,
        )
        assert _ids(snap) == [
            "drought-severe", "frost-critical", "heavy-rain", "heat-wave", "strong-wind",
        ]

    def test_only_today_omits_look_ahead(self, make_snapshot):
        snap = make_snapshot(days=1)
        assert snap.tomorrow is None
        # Default reading is excellent for growing and field work.
        assert _ids(snap) == ["optimal-planting"]

    def test_ids_are_rule_slugs(self, make_snapshot, make_day, quiet):
        snap = make_snapshot(
            current=quiet,
            tomorrow=make_day(min_temp_c=1.0),
            day_after=make_day(min_temp_c=3.0),
        )
        slugs = {r.slug for r in ALERT_RULES}
        assert all(a.id in slugs for a in _alerts(snap))

    def test_idempotent(self, make_snapshot, make_current, make_day):
        snap = make_snapshot(
            current=make_current(temperature_c=32.0, humidity_pct=30.0),
            tomorrow=make_day(min_temp_c=3.0, total_precip_mm=30.0),
        )
        conditions = classify(snap)
        first = generate_alerts(snap, conditions)
        second = generate_alerts(snap, conditions)
        assert [a.model_dump_json() for a in first] == [a.model_dump_json() for a in second]
