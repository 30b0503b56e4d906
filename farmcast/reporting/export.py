"""
Export helpers for advisory reports.

All functions write to disk and return the written ``Path``.

``export_report_json()`` writes the report exactly as
``AdvisoryReport.model_dump(mode="json")`` produces it; no generation
timestamp is added, so exporting the same snapshot twice yields identical
files.  ``export_alerts_csv()`` writes one flat row per alert for
spreadsheets.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

from farmcast.models.advisory import AdvisoryReport

ALERT_CSV_FIELDS = [
    "id", "severity", "alert_type", "crop_type", "title",
    "timeframe", "weather_condition", "description", "recommendation",
]


def export_report_json(report: AdvisoryReport, path: Path) -> Path:
    """Write ``report`` to a pretty-printed JSON file.

    Args:
        report: Advisory report to serialise.
        path:   Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return path


def export_alerts_csv(report: AdvisoryReport, path: Path) -> Path:
    """Write the report's alerts to a UTF-8 CSV file (header only if none)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=ALERT_CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for alert in report.alerts:
            writer.writerow(alert.model_dump(mode="json"))
    return path
