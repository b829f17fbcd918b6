"""Date comparison rules."""

from __future__ import annotations

import datetime as dt

import pendulum

from ...schemas import CandidateFacts, DateRule, parse_instant
from ..results import RuleOutcome
from .numeric import COMPARATORS

_EPOCH_ORDINAL = dt.date(1970, 1, 1).toordinal()
_MICROSECOND = dt.timedelta(microseconds=1)


def epoch_millis(instant: pendulum.DateTime) -> int:
    """Milliseconds since the Unix epoch, floored.

    Integer arithmetic on the local fields keeps instants whose UTC
    equivalent falls outside years 1..9999 comparable.
    """
    offset = instant.utcoffset() or dt.timedelta(0)
    seconds = (
        (instant.toordinal() - _EPOCH_ORDINAL) * 86400
        + instant.hour * 3600
        + instant.minute * 60
        + instant.second
    )
    micros = seconds * 1_000_000 + instant.microsecond - offset // _MICROSECOND
    return micros // 1000


class DateRuleEvaluator:
    """Compare a date fact against the rule date at millisecond resolution."""

    family = DateRule

    def evaluate(self, rule: DateRule, facts: CandidateFacts) -> RuleOutcome:
        fact = getattr(facts, rule.field)
        candidate_instant = parse_instant(fact)
        satisfied = candidate_instant is not None and COMPARATORS[rule.operator](
            epoch_millis(candidate_instant),
            epoch_millis(rule.instant),
        )
        return RuleOutcome(
            rule=rule,
            satisfied=satisfied,
            fact=fact,
            reason=None if satisfied else self.describe(rule),
        )

    @staticmethod
    def describe(rule: DateRule) -> str:
        return f"{rule.field} {rule.operator} {rule.value} not satisfied"
