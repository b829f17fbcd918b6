"""Case-insensitive string equality rules."""

from __future__ import annotations

from ...schemas import CandidateFacts, EqualityRule
from ..results import RuleOutcome


class EqualityRuleEvaluator:
    """Match a string fact against the rule value, ignoring case.

    ``equals`` and ``==`` are aliases and behave identically.
    """

    family = EqualityRule

    def evaluate(self, rule: EqualityRule, facts: CandidateFacts) -> RuleOutcome:
        fact = getattr(facts, rule.field)
        satisfied = (
            fact is not None
            and fact != ""
            and str(fact).lower() == rule.value.lower()
        )
        return RuleOutcome(
            rule=rule,
            satisfied=satisfied,
            fact=fact,
            reason=None if satisfied else self.describe(rule),
        )

    @staticmethod
    def describe(rule: EqualityRule) -> str:
        return f"{rule.field} equals {rule.value} not satisfied"
