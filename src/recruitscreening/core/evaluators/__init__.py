"""Per-family rule evaluators."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ...schemas import CandidateFacts
from ..results import RuleOutcome
from .numeric import NumericRuleEvaluator
from .dates import DateRuleEvaluator
from .equality import EqualityRuleEvaluator


@runtime_checkable
class FamilyEvaluator(Protocol):
    """Evaluator contract for a single rule family."""

    family: type

    def evaluate(self, rule: Any, facts: CandidateFacts) -> RuleOutcome:
        """Return the verdict for ``rule`` against ``facts``."""


__all__ = [
    "FamilyEvaluator",
    "NumericRuleEvaluator",
    "DateRuleEvaluator",
    "EqualityRuleEvaluator",
]
