"""AND-combined evaluation of requirement rules against candidate facts."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..schemas import RULE_FAMILIES, CandidateFacts, RequirementRule
from .evaluators import (
    DateRuleEvaluator,
    EqualityRuleEvaluator,
    FamilyEvaluator,
    NumericRuleEvaluator,
)
from .results import RuleEvaluation, RuleOutcome


class RuleEvaluator:
    """Dispatch each rule to the evaluator registered for its family.

    Every rule is checked; failures are reported in input order. Instances
    hold no mutable state and can be shared across threads and tasks.
    """

    def __init__(self, family_evaluators: Iterable[FamilyEvaluator] | None = None) -> None:
        evaluators = list(family_evaluators) if family_evaluators is not None else [
            NumericRuleEvaluator(),
            DateRuleEvaluator(),
            EqualityRuleEvaluator(),
        ]
        self._dispatch = {evaluator.family: evaluator for evaluator in evaluators}
        missing = [family.__name__ for family in RULE_FAMILIES if family not in self._dispatch]
        if missing:
            raise TypeError(f"No evaluator registered for rule families: {missing}")

    def evaluate(
        self,
        rules: Sequence[RequirementRule],
        facts: CandidateFacts | None,
    ) -> RuleEvaluation:
        facts = facts or CandidateFacts()
        outcomes = tuple(self._evaluate_rule(rule, facts) for rule in rules)
        reasons = tuple(outcome.reason for outcome in outcomes if not outcome.satisfied)
        return RuleEvaluation(
            satisfied=not reasons,
            reasons=reasons,  # type: ignore[arg-type]
            outcomes=outcomes,
        )

    def _evaluate_rule(self, rule: RequirementRule, facts: CandidateFacts) -> RuleOutcome:
        try:
            evaluator = self._dispatch[type(rule)]
        except KeyError as exc:
            raise TypeError(f"Unsupported rule type: {type(rule).__name__}") from exc
        return evaluator.evaluate(rule, facts)


_DEFAULT_EVALUATOR = RuleEvaluator()


def evaluate(rules: Sequence[RequirementRule], facts: CandidateFacts | None) -> RuleEvaluation:
    """Evaluate ``rules`` against ``facts`` with the default family evaluators."""
    return _DEFAULT_EVALUATOR.evaluate(rules, facts)
