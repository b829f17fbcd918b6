from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
)

ApplicationStatus = Literal["pending", "accepted", "rejected"]
Decision = Literal["accepted", "rejected"]

_HTTP_URL_ADAPTER: TypeAdapter[HttpUrl] = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    try:
        _HTTP_URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"not a valid http(s) URL: {value!r}") from exc
    return value


# Validated as an http(s) URL but stored exactly as submitted.
EvidenceUrl = Annotated[str, AfterValidator(_check_http_url)]


class CandidateFacts(BaseModel):
    """Attributes extracted for an applicant.

    Values are kept exactly as the extractor produced them; a malformed value
    simply fails the rules that read it.
    """

    degree: Any = None
    gpa: Any = None
    institution: Any = None
    age: Any = None
    graduation_date: Any = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class ApplicationDocuments(BaseModel):
    """Evidence references submitted with an application."""

    cv_url: EvidenceUrl | None = None
    diploma_url: EvidenceUrl | None = None
    id_card_url: EvidenceUrl | None = None
    parsed: CandidateFacts | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class ApplicationRequest(BaseModel):
    """Inbound application submission."""

    applicant_id: str | None = None
    vacancy_id: str = Field(min_length=1)
    documents: ApplicationDocuments = Field(default_factory=ApplicationDocuments)

    model_config = ConfigDict(extra="forbid")


class BatchApplication(BaseModel):
    """One line of a batch file; ``vacancy_id`` may be omitted."""

    applicant_id: str | None = None
    vacancy_id: str | None = None
    documents: ApplicationDocuments = Field(default_factory=ApplicationDocuments)

    model_config = ConfigDict(extra="forbid")


class Application(BaseModel):
    """Applicant submission evaluated once to a terminal decision."""

    id: str
    applicant_id: str | None = None
    vacancy_id: str
    documents: ApplicationDocuments
    status: Decision
    feedback: str | None = None
    created_at: str

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def facts(self) -> CandidateFacts:
        return self.documents.parsed or CandidateFacts()
