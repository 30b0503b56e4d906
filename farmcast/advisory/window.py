"""
48-hour look-ahead window over forecast days 1 ("tomorrow") and 2 ("day after").

``LookAheadWindow.from_snapshot()`` collects whichever of the two days are
present.  Every aggregate is computed over the *present* days only:

  - ``total_precip_mm``   sum over present days (0.0 when none are present)
  - ``max_temp_c`` etc.   max / min over present days, ``None`` when none are
  - ``mean_*``            mean of both days, ``None`` unless ``complete``

A missing day is never zero-filled.  Rules that would be satisfied by a
missing day's "0 mm" (drought, harvest window) must check ``complete``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from farmcast.models.weather import ForecastDay, WeatherSnapshot

LOOK_AHEAD_DAYS = (1, 2)


@dataclass(frozen=True)
class LookAheadWindow:
    """Present forecast days within the 48-hour window.

    Attributes:
        tomorrow:  Forecast day 1, or ``None`` if the snapshot lacks it.
        day_after: Forecast day 2, or ``None`` if the snapshot lacks it.
    """

    tomorrow:  Optional[ForecastDay]
    day_after: Optional[ForecastDay]

    @classmethod
    def from_snapshot(cls, snapshot: WeatherSnapshot) -> "LookAheadWindow":
        return cls(
            tomorrow=snapshot.forecast_day(LOOK_AHEAD_DAYS[0]),
            day_after=snapshot.forecast_day(LOOK_AHEAD_DAYS[1]),
        )

    @property
    def days(self) -> list[ForecastDay]:
        return [d for d in (self.tomorrow, self.day_after) if d is not None]

    @property
    def complete(self) -> bool:
        """True when both days are present."""
        return self.tomorrow is not None and self.day_after is not None

    @property
    def empty(self) -> bool:
        return not self.days

    # ── Aggregates over present days ──────────────────────────────────────────

    @property
    def total_precip_mm(self) -> float:
        return sum(d.total_precip_mm for d in self.days)

    @property
    def max_temp_c(self) -> Optional[float]:
        return self._extreme(max, lambda d: d.max_temp_c)

    @property
    def min_temp_c(self) -> Optional[float]:
        return self._extreme(min, lambda d: d.min_temp_c)

    @property
    def max_wind_kph(self) -> Optional[float]:
        return self._extreme(max, lambda d: d.max_wind_kph)

    def any_day(self, predicate: Callable[[ForecastDay], bool]) -> bool:
        """True if ``predicate`` holds for at least one present day."""
        return any(predicate(d) for d in self.days)

    # ── Means over both days (complete window only) ───────────────────────────

    @property
    def mean_avg_temp_c(self) -> Optional[float]:
        return self._mean(lambda d: d.avg_temp_c)

    @property
    def mean_avg_humidity_pct(self) -> Optional[float]:
        return self._mean(lambda d: d.avg_humidity_pct)

    @property
    def mean_max_wind_kph(self) -> Optional[float]:
        return self._mean(lambda d: d.max_wind_kph)

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _extreme(
        self,
        fn: Callable[..., float],
        field: Callable[[ForecastDay], float],
    ) -> Optional[float]:
        values = [field(d) for d in self.days]
        return fn(values) if values else None

    def _mean(self, field: Callable[[ForecastDay], float]) -> Optional[float]:
        if not self.complete:
            return None
        values = [field(d) for d in self.days]
        return sum(values) / len(values)
