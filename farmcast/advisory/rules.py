"""
Declarative rule tables shared by the alert, recommendation and chat modules.

A ``Rule`` is a ``(slug, predicate, build)`` triple.  ``evaluate_rules()``
walks a tuple of rules in order and appends ``build(ctx)`` for every rule
whose ``predicate(ctx)`` is true.  Rules never see each other's output, so

  - emission order == table order,
  - a rule can only add records, never suppress another rule's record,
  - several rules with overlapping triggers can fire together.

Threshold ladders that must be mutually exclusive (rainfall, heat) are written
as disjoint predicate bands rather than as an if/elif chain, which keeps every
rule independently testable.

``first_match()`` is the single-answer variant used by the chat responder:
it returns the output of the first rule that fires.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Callable, Generic, Iterable, Optional, TypeVar

from farmcast.advisory.window import LookAheadWindow
from farmcast.models.advisory import FarmingConditions
from farmcast.models.weather import CurrentReading, WeatherSnapshot

logger = logging.getLogger(__name__)

C = TypeVar("C")
T = TypeVar("T")


@dataclass(frozen=True)
class RuleContext:
    """Inputs every advisory rule may read.

    Attributes:
        snapshot:   The full weather snapshot.
        conditions: Classifier output for ``snapshot.current``.
    """

    snapshot:   WeatherSnapshot
    conditions: FarmingConditions

    @property
    def current(self) -> CurrentReading:
        return self.snapshot.current

    @cached_property
    def window(self) -> LookAheadWindow:
        """Forecast days 1-2 of the snapshot, built once per context."""
        return LookAheadWindow.from_snapshot(self.snapshot)


@dataclass(frozen=True)
class Rule(Generic[C, T]):
    """One entry of a rule table.

    Attributes:
        slug:      Stable identifier of the rule (``"frost-critical"``).
        predicate: ``ctx -> bool``; decides whether the rule fires.
        build:     ``ctx -> record``; only called when the predicate holds.
    """

    slug:      str
    predicate: Callable[[C], bool]
    build:     Callable[[C], T]

    def fires(self, ctx: C) -> bool:
        return bool(self.predicate(ctx))


def evaluate_rules(rules: Iterable[Rule[C, T]], ctx: C) -> list[T]:
    """Evaluate every rule against ``ctx`` and collect the fired records.

    Args:
        rules: Ordered rule table.
        ctx:   Context passed to each predicate and builder.

    Returns:
        One record per fired rule, in table order.
    """
    fired: list[T] = []
    for rule in rules:
        if rule.fires(ctx):
            logger.debug("Rule fired: %s", rule.slug)
            fired.append(rule.build(ctx))
    return fired


def first_match(rules: Iterable[Rule[C, T]], ctx: C) -> Optional[T]:
    """Return the record built by the first rule that fires, or ``None``."""
    for rule in rules:
        if rule.fires(ctx):
            logger.debug("Rule matched: %s", rule.slug)
            return rule.build(ctx)
    return None


def fired_slugs(rules: Iterable[Rule[C, T]], ctx: C) -> list[str]:
    """Slugs of every rule whose predicate holds, in table order."""
    return [r.slug for r in rules if r.fires(ctx)]


def in_range(value: float, lo: float, hi: float) -> bool:
    """Closed-interval check ``lo <= value <= hi``."""
    return lo <= value <= hi
