"""
Keyword chat responder: free-text question + snapshot + conditions → answer.

The responder is a prioritized rule table with the same shape as the alert
rules — ``Rule(slug, predicate, build)`` — evaluated with ``first_match()``
so exactly one template answers each question.

Topic priority (first keyword hit wins)
---------------------------------------
    frost        frost, freez, cold
    irrigation   water, irrigat, dry
    pest         pest, insect, bug
    disease      disease, fung, mold, mildew, blight
    planting     plant, sow, seed
    harvest      harvest, pick
    rain         rain, precip, storm
    wind         wind, spray
    temperature  temperature, heat, hot, temp
    conditions   weather, condition, today, forecast

An empty question gets a prompt; anything else unmatched gets the general
conditions summary.  Matching is case-insensitive and anchored at word
starts, so "drain" is not about rain and "debug" is not about bugs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Callable

from farmcast.advisory.rules import Rule, first_match
from farmcast.advisory.window import LookAheadWindow
from farmcast.models.advisory import FarmingConditions
from farmcast.models.weather import WeatherSnapshot
from farmcast.taxonomy.condition_taxonomy import FieldWorkSuitability, RiskLevel

EMPTY_QUESTION_ANSWER = (
    "Ask me about irrigation, pests, diseases, planting, harvesting, frost, "
    "rain, wind or today's farming conditions."
)


@dataclass(frozen=True)
class ChatContext:
    """Inputs of one chat turn."""

    question:   str
    snapshot:   WeatherSnapshot
    conditions: FarmingConditions

    @cached_property
    def text(self) -> str:
        return self.question.lower()

    @cached_property
    def window(self) -> LookAheadWindow:
        return LookAheadWindow.from_snapshot(self.snapshot)


def _mentions(*keywords: str) -> Callable[[ChatContext], bool]:
    pattern = re.compile(r"\b(?:" + "|".join(keywords) + ")")
    return lambda ctx: pattern.search(ctx.text) is not None


# ── Templates ─────────────────────────────────────────────────────────────────

def _frost_answer(ctx: ChatContext) -> str:
    temp = ctx.snapshot.current.temperature_c
    low = ctx.window.min_temp_c
    if temp < 2 or (low is not None and low < 2):
        return (
            "Yes, frost is a serious risk. Cover sensitive crops with frost cloth "
            "tonight and move potted plants indoors."
        )
    if low is not None and low <= 5:
        return (
            f"Night temperatures may drop to {low:.0f}°C. Protect tender plants "
            "and seedlings before sunset."
        )
    if low is None:
        return f"It is {temp:.0f}°C now. I have no forecast to judge frost risk."
    return f"No frost expected: the lowest forecast temperature is {low:.0f}°C."


def _irrigation_answer(ctx: ChatContext) -> str:
    soil = ctx.conditions.soil_moisture.value
    if ctx.conditions.irrigation_needed:
        return (
            f"Yes, irrigate. Soil moisture is {soil}. Water early in the morning "
            "or in the evening to reduce evaporation."
        )
    return f"No extra irrigation needed right now. Soil moisture is {soil}."


def _pest_answer(ctx: ChatContext) -> str:
    risk = ctx.conditions.pest_risk
    if risk == RiskLevel.HIGH:
        return (
            "Pest risk is high. Warm, humid weather favors pests, so inspect crops "
            "daily and consider organic controls."
        )
    return f"Pest risk is {risk.value}. Routine weekly scouting is enough."


def _disease_answer(ctx: ChatContext) -> str:
    risk = ctx.conditions.disease_risk
    if risk == RiskLevel.HIGH:
        return (
            "Disease risk is high. Improve air circulation, avoid overhead "
            "watering and apply a preventive fungicide if needed."
        )
    return f"Disease risk is {risk.value}. Keep foliage dry and monitor for spots."


def _planting_answer(ctx: ChatContext) -> str:
    growing = ctx.conditions.growing_conditions.value
    field = ctx.conditions.field_work_suitability
    if field in (FieldWorkSuitability.UNSUITABLE, FieldWorkSuitability.POOR):
        return (
            f"Growing conditions are {growing}, but field work is {field.value}. "
            "Wait for drier, calmer weather before planting."
        )
    return (
        f"Growing conditions are {growing} and field work is {field.value}. "
        "A reasonable time to plant or transplant."
    )


def _harvest_answer(ctx: ChatContext) -> str:
    field = ctx.conditions.field_work_suitability
    if field == FieldWorkSuitability.EXCELLENT and ctx.snapshot.current.precipitation_mm == 0:
        return "Excellent harvest conditions: dry and calm. Harvest today or tomorrow."
    return f"Field work suitability is {field.value}. Harvest when conditions improve."


def _rain_answer(ctx: ChatContext) -> str:
    precip = ctx.snapshot.current.precipitation_mm
    if ctx.window.empty:
        return f"Recent rainfall is {precip:.1f}mm. No forecast is available."
    total = ctx.window.total_precip_mm
    return (
        f"Recent rainfall is {precip:.1f}mm and {total:.1f}mm is forecast over "
        "the next two days."
    )


def _wind_answer(ctx: ChatContext) -> str:
    wind = ctx.snapshot.current.wind_kph
    if wind > 15:
        return f"Wind is {wind:.0f} km/h. Avoid spraying; drift will be a problem."
    return f"Wind is {wind:.0f} km/h, calm enough for spraying."


def _temperature_answer(ctx: ChatContext) -> str:
    temp = ctx.snapshot.current.temperature_c
    peak = ctx.window.max_temp_c
    if peak is None:
        return f"It is {temp:.0f}°C now."
    return f"It is {temp:.0f}°C now, with highs up to {peak:.0f}°C over the next two days."


def _conditions_answer(ctx: ChatContext) -> str:
    c = ctx.conditions
    return (
        f"Growing conditions are {c.growing_conditions.value}, soil is "
        f"{c.soil_moisture.value}, pest risk {c.pest_risk.value}, disease risk "
        f"{c.disease_risk.value} and field work suitability "
        f"{c.field_work_suitability.value}."
    )


CHAT_RULES: tuple[Rule[ChatContext, str], ...] = (
    Rule("frost", _mentions("frost", "freez", "cold"), _frost_answer),
    Rule("irrigation", _mentions("water", "irrigat", "dry"), _irrigation_answer),
    Rule("pest", _mentions("pest", "insect", "bug"), _pest_answer),
    Rule("disease", _mentions("disease", "fung", "mold", "mildew", "blight"), _disease_answer),
    Rule("planting", _mentions("plant", "sow", "seed"), _planting_answer),
    Rule("harvest", _mentions("harvest", "pick"), _harvest_answer),
    Rule("rain", _mentions("rain", "precip", "storm"), _rain_answer),
    Rule("wind", _mentions("wind", "spray"), _wind_answer),
    Rule("temperature", _mentions("temperature", "heat", "hot", "temp"), _temperature_answer),
    Rule("conditions", _mentions("weather", "condition", "today", "forecast"), _conditions_answer),
)


def answer(
    question: str,
    snapshot: WeatherSnapshot,
    conditions: FarmingConditions,
) -> str:
    """Answer a farmer's free-text question from the current conditions.

    Args:
        question:   Free text, any case.
        snapshot:   Weather snapshot the conditions were derived from.
        conditions: Classifier output for ``snapshot``.

    Returns:
        A single answer string; never empty.
    """
    if not question or not question.strip():
        return EMPTY_QUESTION_ANSWER
    ctx = ChatContext(question.strip(), snapshot, conditions)
    return first_match(CHAT_RULES, ctx) or _conditions_answer(ctx)
