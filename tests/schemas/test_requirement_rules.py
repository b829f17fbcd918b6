from __future__ import annotations

import pytest
from pydantic import ValidationError

from recruitscreening.schemas import (
    Application,
    ApplicationDocuments,
    CandidateFacts,
    DateRule,
    EqualityRule,
    NumericRule,
    Vacancy,
    VacancyDraft,
    dump_rules,
    parse_rules,
)


def test_rules_are_discriminated_by_field():
    rules = parse_rules(
        [
            {"field": "gpa", "operator": ">=", "value": 3},
            {"field": "graduation_date", "operator": "<", "value": "2024-06-30"},
            {"field": "institution", "operator": "==", "value": "AAU"},
        ]
    )

    assert [type(rule) for rule in rules] == [NumericRule, DateRule, EqualityRule]


@pytest.mark.parametrize(
    "raw",
    [
        {"field": "gpa", "operator": ">=", "value": "3.0"},
        {"field": "age", "operator": ">=", "value": True},
        {"field": "age", "operator": "equals", "value": 18},
        {"field": "gpa", "operator": "<", "value": float("inf")},
        {"field": "age", "operator": "<", "value": 10**400},
        {"field": "degree", "operator": ">=", "value": "BSc"},
        {"field": "degree", "operator": "equals", "value": 1},
        {"field": "graduation_date", "operator": ">=", "value": "last summer"},
        {"field": "graduation_date", "operator": "equals", "value": "2022-07-01"},
        {"field": "height", "operator": ">=", "value": 180},
        {"field": "gpa", "operator": ">=", "value": 3.0, "weight": 2},
        {"field": "gpa", "value": 3.0},
    ],
)
def test_ill_typed_rules_do_not_validate(raw):
    with pytest.raises(ValidationError):
        parse_rules([raw])


def test_dump_preserves_variant_shape():
    raw = [
        {"field": "age", "operator": "<=", "value": 35},
        {"field": "gpa", "operator": ">", "value": 2.75},
        {"field": "graduation_date", "operator": ">=", "value": "2020-01-01"},
        {"field": "degree", "operator": "equals", "value": "MSc"},
    ]

    assert dump_rules(parse_rules(raw)) == raw


def test_rules_are_immutable():
    rule = NumericRule(field="gpa", operator=">=", value=3.0)

    with pytest.raises(ValidationError):
        rule.value = 2.0  # type: ignore[misc]


def test_vacancy_draft_defaults_to_no_requirements():
    draft = VacancyDraft(title="Analyst", description="Data team", deadline="2026-12-31")

    assert draft.requirements == []


@pytest.mark.parametrize("missing", ["title", "description", "deadline"])
def test_vacancy_draft_requires_non_empty_fields(missing):
    payload = {"title": "Analyst", "description": "Data team", "deadline": "2026-12-31"}
    payload[missing] = ""

    with pytest.raises(ValidationError):
        VacancyDraft.model_validate(payload)


def test_vacancy_round_trips_through_json():
    vacancy = Vacancy(
        id="vac_1",
        title="Analyst",
        description="Data team",
        requirements=parse_rules([{"field": "gpa", "operator": ">=", "value": 3.0}]),
        deadline="2026-12-31",
        created_at="2026-10-01T00:00:00Z",
    )

    restored = Vacancy.model_validate_json(vacancy.model_dump_json())

    assert restored == vacancy
    assert isinstance(restored.requirements[0], NumericRule)


def test_application_status_excludes_pending():
    with pytest.raises(ValidationError):
        Application(
            id="app_1",
            vacancy_id="vac_1",
            documents=ApplicationDocuments(),
            status="pending",  # type: ignore[arg-type]
            created_at="2026-10-01T00:00:00Z",
        )


def test_candidate_facts_keep_raw_values():
    facts = CandidateFacts(gpa="3.4", graduation_date="soon")

    assert facts.gpa == "3.4"
    assert facts.graduation_date == "soon"
    assert facts.degree is None


def test_documents_reject_invalid_urls():
    with pytest.raises(ValidationError):
        ApplicationDocuments(cv_url="not a url")


def test_documents_keep_submitted_urls_verbatim():
    documents = ApplicationDocuments(
        cv_url="https://files.example.com",
        diploma_url="https://files.example.com/Diploma%20Scan.pdf?v=2",
    )

    assert documents.cv_url == "https://files.example.com"
    assert documents.model_dump(mode="json")["diploma_url"] == (
        "https://files.example.com/Diploma%20Scan.pdf?v=2"
    )
