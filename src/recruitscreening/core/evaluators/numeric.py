"""Numeric threshold rules."""

from __future__ import annotations

import math
import operator
from typing import Any, Callable

from ...schemas import CandidateFacts, NumericRule
from ..results import RuleOutcome, format_value

COMPARATORS: dict[str, Callable[[Any, Any], bool]] = {
    ">=": operator.ge,
    "<=": operator.le,
    ">": operator.gt,
    "<": operator.lt,
    "==": operator.eq,
}


def is_number(value: Any) -> bool:
    # ints of any size compare exactly against floats; only floats can be nan/inf
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


class NumericRuleEvaluator:
    """Compare a numeric fact against the rule threshold."""

    family = NumericRule

    def evaluate(self, rule: NumericRule, facts: CandidateFacts) -> RuleOutcome:
        fact = getattr(facts, rule.field)
        satisfied = is_number(fact) and COMPARATORS[rule.operator](fact, rule.value)
        return RuleOutcome(
            rule=rule,
            satisfied=satisfied,
            fact=fact,
            reason=None if satisfied else self.describe(rule),
        )

    @staticmethod
    def describe(rule: NumericRule) -> str:
        return f"{rule.field} {rule.operator} {format_value(rule.value)} not satisfied"
