"""Threshold rules engine pattern.

Rules are static data: a priority, a conjunction of threshold conditions,
and the outcome to emit when every condition holds. Evaluation is a pure
function (rule, facts) -> Matched | NoMatch. This makes them:
- Trivially testable (pure input/output)
- Independent (every rule sees the full fact set, none short-circuits)
- Auditable (deterministic, explainable)

Example domain: a shop granting discounts from purchase totals.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Union

logger = logging.getLogger(__name__)


class RuleEvaluationError(Exception):
    """Raised when a rule cannot be evaluated against a fact set."""

    def __init__(self, rule_name: str, reason: str):
        self.rule_name = rule_name
        self.reason = reason
        super().__init__(f"Rule {rule_name!r} failed: {reason}")


# ---------------------------------------------------------------------------
# Conditions
# ---------------------------------------------------------------------------

class Operator(str, Enum):
    """Comparison operators available to a condition."""

    GREATER_THAN = "greater_than"
    GREATER_THAN_INCLUSIVE = "greater_than_inclusive"
    LESS_THAN = "less_than"
    LESS_THAN_INCLUSIVE = "less_than_inclusive"
    EQUAL = "equal"


_COMPARATORS: dict[Operator, Callable[[Any, Any], bool]] = {
    Operator.GREATER_THAN: operator.gt,
    Operator.GREATER_THAN_INCLUSIVE: operator.ge,
    Operator.LESS_THAN: operator.lt,
    Operator.LESS_THAN_INCLUSIVE: operator.le,
    Operator.EQUAL: operator.eq,
}


@dataclass(frozen=True)
class Condition:
    """A single `fact <operator> threshold` comparison."""

    fact: str
    operator: Operator
    threshold: Any

    def holds(self, facts: Mapping[str, Any]) -> bool:
        """Compare the named fact against the threshold.

        Raises KeyError if the fact is absent and TypeError if the values
        cannot be compared; `evaluate_rule` turns both into
        RuleEvaluationError.
        """
        return _COMPARATORS[self.operator](facts[self.fact], self.threshold)

    def describe(self) -> str:
        return f"{self.fact} {self.operator.value} {self.threshold}"


# ---------------------------------------------------------------------------
# Rules and results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RuleOutcome:
    """What a rule emits when it matches."""

    event_type: str
    discount_percentage: int = 0
    applied_immediately: bool = False
    message: str = ""


@dataclass(frozen=True)
class Rule:
    """A priority-ranked conjunction of conditions.

    Lower priority numbers are evaluated first. Priority only orders
    evaluation; it never stops later rules from matching.
    """

    name: str
    priority: int
    conditions: tuple[Condition, ...]
    outcome: RuleOutcome


@dataclass(frozen=True)
class Matched:
    """The rule's conditions all held."""

    rule: Rule

    @property
    def outcome(self) -> RuleOutcome:
        return self.rule.outcome


@dataclass(frozen=True)
class NoMatch:
    """At least one of the rule's conditions did not hold."""

    rule: Rule
    failed: tuple[Condition, ...] = ()


RuleResult = Union[Matched, NoMatch]


def evaluate_rule(rule: Rule, facts: Mapping[str, Any]) -> RuleResult:
    """Evaluate one rule against a fact set.

    Every condition is checked so that NoMatch can report all the
    conditions that failed, not only the first one.
    """
    failed = []
    for condition in rule.conditions:
        try:
            held = condition.holds(facts)
        except KeyError:
            raise RuleEvaluationError(rule.name, f"missing fact {condition.fact!r}") from None
        except TypeError as exc:
            raise RuleEvaluationError(rule.name, f"cannot evaluate {condition.describe()}: {exc}") from exc
        if not held:
            failed.append(condition)

    if failed:
        return NoMatch(rule=rule, failed=tuple(failed))
    return Matched(rule=rule)


# ---------------------------------------------------------------------------
# Rule sets
# ---------------------------------------------------------------------------

@dataclass
class RuleSetResult:
    """Aggregate outcome of evaluating every rule in a set."""

    results: list[RuleResult]
    matched: list[Matched] = field(default_factory=list)

    def __post_init__(self):
        self.matched = [r for r in self.results if isinstance(r, Matched)]

    @property
    def any_matched(self) -> bool:
        return len(self.matched) > 0


class RuleSet:
    """An ordered collection of rules.

    Usage::

        rules = RuleSet([
            Rule(
                name="big-spender",
                priority=1,
                conditions=(Condition("total", Operator.GREATER_THAN, 500),),
                outcome=RuleOutcome("big-spender-discount", 20),
            ),
        ])
        result = rules.evaluate({"total": 600})
        for match in result.matched:
            notify(match.outcome)
    """

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules: list[Rule] = []
        for rule in rules:
            self.add(rule)

    def add(self, rule: Rule) -> None:
        """Insert a rule, keeping priority order (stable on ties)."""
        index = len(self._rules)
        while index > 0 and self._rules[index - 1].priority > rule.priority:
            index -= 1
        self._rules.insert(index, rule)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def evaluate(self, facts: Mapping[str, Any]) -> RuleSetResult:
        """Evaluate every rule independently, in priority order."""
        results = []
        for rule in self._rules:
            result = evaluate_rule(rule, facts)
            logger.debug("Rule %s -> %s", rule.name, type(result).__name__)
            results.append(result)
        return RuleSetResult(results=results)

    def __len__(self) -> int:
        return len(self._rules)
