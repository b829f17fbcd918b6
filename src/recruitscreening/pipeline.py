"""Recruitment pipeline assembly and execution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Mapping

import pendulum
import structlog
from pydantic import ValidationError as PydanticValidationError

from . import __version__
from .core import DecisionAssembler
from .errors import NotFoundError, ValidationError
from .schemas import (
    Application,
    ApplicationRequest,
    BatchApplication,
    Vacancy,
    VacancyDraft,
)
from .store import Store, new_id


class ApplicationLoadError(ValueError):
    """Raised when application loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[BatchApplication]):
        super().__init__("Application loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Application loading failed: {self.errors}"


class ApplicationLoader:
    """Load batch applications from a JSON-lines file."""

    def load(self, path: Path) -> list[BatchApplication]:
        requests: list[BatchApplication] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict):
                    errors.append(f"line {idx}: expected a JSON object")
                    continue
                try:
                    requests.append(BatchApplication.model_validate(record))
                except PydanticValidationError as exc:
                    errors.append(f"line {idx}: {exc.error_count()} validation error(s)")
                    continue
        if errors:
            raise ApplicationLoadError(errors, requests)
        return requests


class VacancyLoader:
    """Load a vacancy draft document."""

    def load(self, path: Path) -> dict[str, Any]:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValidationError(f"Invalid vacancy JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ValidationError("Vacancy document must be a JSON object")
        return data


class OutputWriter:
    """Persist batch results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class RecruitmentPipeline:
    """Entry point for vacancy registration and application decisions."""

    def __init__(
        self,
        *,
        store: Store,
        assembler: DecisionAssembler,
        application_loader: ApplicationLoader | None = None,
        vacancy_loader: VacancyLoader | None = None,
        writer: OutputWriter | None = None,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
    ) -> None:
        self._store = store
        self._assembler = assembler
        self._applications = application_loader or ApplicationLoader()
        self._vacancies = vacancy_loader or VacancyLoader()
        self._writer = writer or OutputWriter()
        self._now_provider = now_provider or (lambda: pendulum.now("UTC"))
        self._logger = structlog.get_logger(__name__)

    def create_vacancy(self, payload: VacancyDraft | Mapping[str, Any]) -> Vacancy:
        draft = _validate(VacancyDraft, payload, "vacancy")
        vacancy = Vacancy(
            id=new_id("vac"),
            title=draft.title,
            description=draft.description,
            requirements=tuple(draft.requirements),
            deadline=draft.deadline,
            created_at=self._now_provider().to_iso8601_string(),
        )
        stored = self._store.vacancies.insert(vacancy)
        self._logger.info(
            "vacancy.created",
            vacancy_id=stored.id,
            requirement_count=len(stored.requirements),
        )
        return stored

    def list_vacancies(self) -> list[Vacancy]:
        return self._store.vacancies.list()

    def get_vacancy(self, vacancy_id: str) -> Vacancy:
        vacancy = self._store.vacancies.get(vacancy_id)
        if vacancy is None:
            raise NotFoundError("Vacancy", vacancy_id)
        return vacancy

    async def submit_application(
        self, payload: ApplicationRequest | Mapping[str, Any]
    ) -> Application:
        request = _validate(ApplicationRequest, payload, "application")
        return await self._assembler.create_application(
            request.vacancy_id,
            request.documents,
            applicant_id=request.applicant_id,
        )

    def list_applications(self, vacancy_id: str | None = None) -> list[Application]:
        if vacancy_id is None:
            return self._store.applications.list()
        return self._store.applications.list(lambda item: item.vacancy_id == vacancy_id)

    async def run_batch(
        self,
        *,
        vacancy_path: Path,
        applications_path: Path,
        output_path: Path,
    ) -> list[dict]:
        vacancy_payload = self._vacancies.load(vacancy_path)
        vacancy = self.create_vacancy(vacancy_payload)

        load_errors: list[str] = []
        try:
            requests = self._applications.load(applications_path)
        except ApplicationLoadError as exc:
            requests = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("batch.partial_load", errors=exc.errors)

        results: list[dict] = []
        for position, request in enumerate(requests, start=1):
            if request.vacancy_id is not None and request.vacancy_id != vacancy.id:
                load_errors.append(
                    f"entry {position}: vacancy_id {request.vacancy_id!r} does not match "
                    f"batch vacancy {vacancy.id!r}"
                )
                self._logger.warning(
                    "batch.vacancy_mismatch",
                    entry=position,
                    vacancy_id=request.vacancy_id,
                    batch_vacancy_id=vacancy.id,
                )
                continue
            application = await self._assembler.create_application(
                vacancy.id,
                request.documents,
                applicant_id=request.applicant_id,
            )
            results.append(application.model_dump(mode="json"))

        metadata = {
            "vacancy_id": vacancy.id,
            "application_count": len(results),
            "accepted": sum(1 for item in results if item["status"] == "accepted"),
            "rejected": sum(1 for item in results if item["status"] == "rejected"),
            "errors": load_errors,
            "timestamp": self._now_provider().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(output_path, {"metadata": metadata, "results": results})
        return results


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")


def _validate(model, payload, subject: str):
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(subject, exc) from exc
