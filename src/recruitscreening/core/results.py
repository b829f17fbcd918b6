"""Evaluation result containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..schemas import RequirementRule


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    """Verdict for a single requirement rule."""

    rule: RequirementRule
    satisfied: bool
    fact: Any = None
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class RuleEvaluation:
    """AND-combined verdict for an ordered rule set."""

    satisfied: bool
    reasons: tuple[str, ...] = ()
    outcomes: tuple[RuleOutcome, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "satisfied": self.satisfied,
            "reasons": list(self.reasons),
            "outcomes": [
                {
                    "rule": outcome.rule.model_dump(mode="json"),
                    "satisfied": outcome.satisfied,
                    "reason": outcome.reason,
                }
                for outcome in self.outcomes
            ],
        }


def format_value(value: Any) -> str:
    """Render a rule value for feedback; integral floats drop the ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
