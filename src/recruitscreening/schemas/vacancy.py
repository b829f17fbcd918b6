from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .rules import RequirementRule


class VacancyDraft(BaseModel):
    """Vacancy fields supplied by the caller before an id is assigned."""

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    requirements: list[RequirementRule] = Field(default_factory=list)
    deadline: str = Field(min_length=1)

    model_config = ConfigDict(extra="forbid")


class Vacancy(BaseModel):
    """Job posting with its ordered, AND-combined requirement set."""

    id: str
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    requirements: tuple[RequirementRule, ...] = ()
    deadline: str = Field(min_length=1)
    created_at: str

    model_config = ConfigDict(extra="forbid", frozen=True)
