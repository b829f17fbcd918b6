"""Requirement rule variants.

A rule is discriminated by ``field``; each family fixes its own operator set
and value type, so an ill-typed rule never validates.
"""

from __future__ import annotations

import datetime as dt
import math
from typing import Annotated, Any, Literal, Union

import pendulum
from pendulum.parsing.exceptions import ParserError
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    field_validator,
)

ComparisonOperator = Literal[">=", "<=", ">", "<", "=="]
EqualityOperator = Literal["equals", "=="]

NumericField = Literal["gpa", "age"]
DateField = Literal["graduation_date"]
EqualityField = Literal["degree", "institution"]

FACT_FIELDS: tuple[str, ...] = ("degree", "gpa", "institution", "age", "graduation_date")


def parse_instant(value: Any) -> pendulum.DateTime | None:
    """Parse an ISO-8601 string or date object into an aware instant.

    Naive inputs and date-only strings are taken as UTC. Anything that does
    not resolve to a point in time yields ``None``.
    """
    if isinstance(value, dt.datetime):
        return pendulum.instance(value)
    if isinstance(value, dt.date):
        return pendulum.datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = pendulum.parse(value.strip())
    except (ValueError, TypeError, OverflowError, ParserError):
        return None
    if not isinstance(parsed, pendulum.DateTime):
        return None
    return parsed


class NumericRule(BaseModel):
    """Threshold on a numeric fact (``gpa`` or ``age``)."""

    field: NumericField
    operator: ComparisonOperator
    value: StrictInt | StrictFloat

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("value")
    @classmethod
    def _require_finite(cls, value: int | float) -> int | float:
        try:
            finite = math.isfinite(value)
        except OverflowError:
            finite = False
        if not finite:
            raise ValueError("value must be a finite number")
        return value


class DateRule(BaseModel):
    """Comparison against an ISO-8601 date (``graduation_date``)."""

    field: DateField
    operator: ComparisonOperator
    value: StrictStr

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("value")
    @classmethod
    def _require_iso_date(cls, value: str) -> str:
        if parse_instant(value) is None:
            raise ValueError(f"value is not an ISO-8601 date: {value!r}")
        return value

    @property
    def instant(self) -> pendulum.DateTime:
        return parse_instant(self.value)  # type: ignore[return-value]


class EqualityRule(BaseModel):
    """Case-insensitive match on a string fact (``degree`` or ``institution``)."""

    field: EqualityField
    operator: EqualityOperator
    value: StrictStr

    model_config = ConfigDict(extra="forbid", frozen=True)


RequirementRule = Annotated[
    Union[NumericRule, DateRule, EqualityRule],
    Field(discriminator="field"),
]

RULE_FAMILIES: tuple[type[BaseModel], ...] = (NumericRule, DateRule, EqualityRule)

_RULE_LIST_ADAPTER: TypeAdapter[list[RequirementRule]] = TypeAdapter(list[RequirementRule])


def parse_rules(raw: Any) -> list[RequirementRule]:
    """Validate a raw sequence of rule mappings (raises pydantic ValidationError)."""
    return _RULE_LIST_ADAPTER.validate_python(raw)


def dump_rules(rules: list[RequirementRule]) -> list[dict[str, Any]]:
    return _RULE_LIST_ADAPTER.dump_python(rules, mode="json")


__all__ = [
    "ComparisonOperator",
    "EqualityOperator",
    "FACT_FIELDS",
    "NumericRule",
    "DateRule",
    "EqualityRule",
    "RequirementRule",
    "RULE_FAMILIES",
    "parse_instant",
    "parse_rules",
    "dump_rules",
]
