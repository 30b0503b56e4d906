"""
Advisory engine: one snapshot in, one ``AdvisoryReport`` out.

    snapshot ─► classify() ─► conditions ─┬─► recommend()       ─► recommendations
                                          └─► generate_alerts() ─► alerts

The classifier runs exactly once; both generators read its output and the
snapshot independently.  The engine is synchronous and holds no state, so
concurrent refresh cycles can call ``evaluate()`` without coordination.
"""

from __future__ import annotations

import logging

from farmcast.advisory.alerts import generate_alerts
from farmcast.advisory.classifier import classify
from farmcast.advisory.recommendations import recommend
from farmcast.models.advisory import AdvisoryReport
from farmcast.models.weather import WeatherSnapshot

logger = logging.getLogger(__name__)


def evaluate(snapshot: WeatherSnapshot) -> AdvisoryReport:
    """Classify a snapshot and run both rule tables against it.

    Args:
        snapshot: A structurally valid ``WeatherSnapshot``.

    Returns:
        ``AdvisoryReport`` with conditions, recommendations and alerts.
    """
    conditions = classify(snapshot.current)
    recommendations = recommend(snapshot, conditions)
    alerts = generate_alerts(snapshot, conditions)

    if len(snapshot.forecast_days) < 3:
        logger.debug(
            "Snapshot has %d forecast day(s); look-ahead rules use present days only.",
            len(snapshot.forecast_days),
        )

    logger.info(
        "Advisory evaluated for %s: %d recommendation(s), %d alert(s) [%s]",
        snapshot.location or "unnamed location",
        len(recommendations),
        len(alerts),
        ", ".join(a.id for a in alerts) or "none",
    )

    return AdvisoryReport(
        location=snapshot.location,
        conditions=conditions,
        recommendations=tuple(recommendations),
        alerts=tuple(alerts),
    )
