"""
ASCII terminal formatters for CLI advisory output.

All formatters accept advisory models and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Severity tags
-------------
Alerts are listed in the order the rule table emitted them, each prefixed
with a bracketed severity tag so the most urgent lines stand out::

  [CRITICAL] frost-critical      Critical Frost Warning
  [HIGH]     heavy-rain          Heavy Rainfall Expected
"""

from __future__ import annotations

from typing import Sequence

from farmcast.models.advisory import (
    AdvisoryReport,
    CropAlert,
    CropRecommendation,
    FarmingConditions,
)
from farmcast.models.weather import WeatherSnapshot


def format_severity_tag(severity: str) -> str:
    """Return ``[SEVERITY]`` padded to a fixed width."""
    return f"[{str(severity).upper()}]".ljust(10)


# ── Current weather ───────────────────────────────────────────────────────────


def format_weather_summary(snapshot: WeatherSnapshot) -> str:
    """Current reading plus one line per forecast day."""
    c = snapshot.current
    lines: list[str] = []
    lines.append("")
    lines.append("=== Current Weather ===")
    lines.append(f"  Location:      {snapshot.location or 'unknown'}")
    lines.append(f"  Temperature:   {c.temperature_c:.1f} C")
    lines.append(f"  Humidity:      {c.humidity_pct:.0f}%")
    lines.append(f"  Precipitation: {c.precipitation_mm:.1f} mm")
    lines.append(f"  Wind:          {c.wind_kph:.1f} km/h")
    lines.append(f"  UV index:      {c.uv_index:.0f}")

    if not snapshot.forecast_days:
        lines.append("")
        lines.append("  (no forecast days in snapshot)")
        return "\n".join(lines)

    lines.append("")
    header = (
        f"    {'Day':>3}  {'Date':<10}  {'Min':>6}  {'Max':>6}  "
        f"{'Rain':>7}  {'Wind':>7}  {'Hum':>4}"
    )
    lines.append(header)
    lines.append("    " + "-" * (len(header) - 4))
    for i, d in enumerate(snapshot.forecast_days):
        date_str = d.forecast_date.isoformat() if d.forecast_date else "-"
        lines.append(
            f"    {i:>3}  {date_str:<10}  {d.min_temp_c:>5.1f}C  {d.max_temp_c:>5.1f}C  "
            f"{d.total_precip_mm:>5.1f}mm  {d.max_wind_kph:>4.0f}kph  "
            f"{d.avg_humidity_pct:>3.0f}%"
        )
    return "\n".join(lines)


# ── Conditions ────────────────────────────────────────────────────────────────


def format_conditions_table(conditions: FarmingConditions) -> str:
    """Two-column table of the six classified condition fields."""
    rows = [
        ("Soil moisture",    conditions.soil_moisture.value),
        ("Growing",          conditions.growing_conditions.value),
        ("Pest risk",        conditions.pest_risk.value),
        ("Disease risk",     conditions.disease_risk.value),
        ("Irrigation",       "needed" if conditions.irrigation_needed else "not needed"),
        ("Field work",       conditions.field_work_suitability.value),
    ]
    lines = ["", "=== Farming Conditions ==="]
    for label, value in rows:
        lines.append(f"  {label + ':':<15} {value}")
    return "\n".join(lines)


# ── Recommendations ───────────────────────────────────────────────────────────


def format_recommendations_table(recommendations: Sequence[CropRecommendation]) -> str:
    """Recommendations in emitted order with priority, action and timing."""
    lines = ["", "=== Crop Recommendations ==="]
    if not recommendations:
        lines.append("  (no recommendations for current conditions)")
        return "\n".join(lines)

    header = f"    {'Priority':<8}  {'Action':<24}  {'Crops':<20}  Timing"
    lines.append(header)
    lines.append("    " + "-" * (len(header) - 4 + 20))
    for r in recommendations:
        lines.append(
            f"    {r.priority.value:<8}  {r.action[:24]:<24}  "
            f"{r.crop_type[:20]:<20}  {r.timing}"
        )
        lines.append(f"              {r.description}")
    return "\n".join(lines)


# ── Alerts ────────────────────────────────────────────────────────────────────


def format_alerts_table(alerts: Sequence[CropAlert]) -> str:
    """Alerts in emitted order, each with a severity tag and recommendation."""
    lines = ["", "=== Crop Alerts ==="]
    if not alerts:
        lines.append("  (no active alerts)")
        return "\n".join(lines)

    for a in alerts:
        lines.append(f"  {format_severity_tag(a.severity)} {a.id:<20} {a.title}")
        lines.append(f"             {a.description}")
        lines.append(f"             Action:    {a.recommendation}")
        lines.append(f"             Timeframe: {a.timeframe} ({a.weather_condition})")
    return "\n".join(lines)


# ── Full report ───────────────────────────────────────────────────────────────


def format_advisory_report(
    report: AdvisoryReport,
    snapshot: WeatherSnapshot | None = None,
) -> str:
    """Combine the weather summary (when given), conditions, recommendations
    and alerts into one printable block."""
    parts: list[str] = []
    if snapshot is not None:
        parts.append(format_weather_summary(snapshot))
    parts.append(format_conditions_table(report.conditions))
    parts.append(format_recommendations_table(report.recommendations))
    parts.append(format_alerts_table(report.alerts))

    top = report.highest_severity()
    parts.append("")
    parts.append(
        f"  Summary: {len(report.recommendations)} recommendation(s), "
        f"{len(report.alerts)} alert(s)"
        + (f", highest severity {top.value}" if top else "")
    )
    return "\n".join(parts)
