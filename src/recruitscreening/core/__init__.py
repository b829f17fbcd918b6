"""Core rule evaluation and decision components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .decision import DEFAULT_FEEDBACK_SEPARATOR, DecisionAssembler
from .evaluators import (
    DateRuleEvaluator,
    EqualityRuleEvaluator,
    FamilyEvaluator,
    NumericRuleEvaluator,
)
from .results import RuleEvaluation, RuleOutcome
from .rules import RuleEvaluator, evaluate

__all__ = [
    "FamilyEvaluator",
    "RuleEvaluator",
    "RuleEvaluation",
    "RuleOutcome",
    "evaluate",
    "DecisionAssembler",
    "DEFAULT_FEEDBACK_SEPARATOR",
    "NumericRuleEvaluator",
    "DateRuleEvaluator",
    "EqualityRuleEvaluator",
]
