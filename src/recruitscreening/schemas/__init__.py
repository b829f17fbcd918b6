"""Pydantic schema definitions for vacancies, rules and applications."""

from __future__ import annotations

from .application import (
    Application,
    ApplicationDocuments,
    ApplicationRequest,
    ApplicationStatus,
    BatchApplication,
    CandidateFacts,
    Decision,
)
from .rules import (
    FACT_FIELDS,
    DateRule,
    EqualityRule,
    NumericRule,
    RequirementRule,
    RULE_FAMILIES,
    dump_rules,
    parse_instant,
    parse_rules,
)
from .vacancy import Vacancy, VacancyDraft

__all__ = [
    "Application",
    "ApplicationDocuments",
    "ApplicationRequest",
    "ApplicationStatus",
    "BatchApplication",
    "CandidateFacts",
    "Decision",
    "FACT_FIELDS",
    "NumericRule",
    "DateRule",
    "EqualityRule",
    "RequirementRule",
    "RULE_FAMILIES",
    "dump_rules",
    "parse_instant",
    "parse_rules",
    "Vacancy",
    "VacancyDraft",
]
