"""Decision assembly: vacancy lookup, extraction, evaluation, persistence."""

from __future__ import annotations

import inspect
from typing import Any, Callable

import pendulum
import structlog
from pydantic import ValidationError as PydanticValidationError

from ..errors import ExtractionError, NotFoundError
from ..extraction import FactExtractor
from ..schemas import Application, ApplicationDocuments, CandidateFacts, Vacancy
from ..store import Store, new_id
from .results import RuleEvaluation
from .rules import RuleEvaluator

DEFAULT_FEEDBACK_SEPARATOR = "; "


class DecisionAssembler:
    """Create applications with a status fixed at creation time."""

    def __init__(
        self,
        *,
        store: Store,
        extractor: FactExtractor,
        evaluator: RuleEvaluator | None = None,
        feedback_separator: str | None = None,
        audit_logger: Any | None = None,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
        id_factory: Callable[[str], str] | None = None,
    ) -> None:
        self._store = store
        self._extractor = extractor
        self._evaluator = evaluator or RuleEvaluator()
        self._separator = (
            DEFAULT_FEEDBACK_SEPARATOR if feedback_separator is None else feedback_separator
        )
        self._audit = audit_logger
        self._now_provider = now_provider or (lambda: pendulum.now("UTC"))
        self._id_factory = id_factory or new_id
        self._logger = structlog.get_logger(__name__)

    async def create_application(
        self,
        vacancy_id: str,
        documents: ApplicationDocuments,
        *,
        applicant_id: str | None = None,
    ) -> Application:
        vacancy = self._resolve_vacancy(vacancy_id)
        facts = await self._extract(documents)
        evaluation = self._evaluator.evaluate(vacancy.requirements, facts)

        application = Application(
            id=self._id_factory("app"),
            applicant_id=applicant_id,
            vacancy_id=vacancy.id,
            documents=documents.model_copy(update={"parsed": facts}),
            status="accepted" if evaluation.satisfied else "rejected",
            feedback=self._feedback(evaluation),
            created_at=self._now_provider().to_iso8601_string(),
        )
        stored = self._store.applications.insert(application)

        self._logger.info(
            "application.decided",
            application_id=stored.id,
            vacancy_id=vacancy.id,
            status=stored.status,
            unmet_rules=len(evaluation.reasons),
        )
        if self._audit:
            self._record_audit(stored, evaluation, facts)
        return stored

    def _record_audit(
        self,
        application: Application,
        evaluation: RuleEvaluation,
        facts: CandidateFacts,
    ) -> None:
        # the application is already stored at this point
        try:
            self._audit.append(
                {
                    "application_id": application.id,
                    "vacancy_id": application.vacancy_id,
                    "applicant_id": application.applicant_id,
                    "status": application.status,
                    "reasons": list(evaluation.reasons),
                    "facts": facts.model_dump(mode="json"),
                    "created_at": application.created_at,
                }
            )
        except Exception as exc:  # noqa: BLE001
            self._logger.error(
                "audit.failed",
                application_id=application.id,
                error=str(exc),
            )

    def _resolve_vacancy(self, vacancy_id: str) -> Vacancy:
        vacancy = self._store.vacancies.get(vacancy_id)
        if vacancy is None:
            self._logger.warning("application.vacancy_missing", vacancy_id=vacancy_id)
            raise NotFoundError("Vacancy", vacancy_id)
        return vacancy

    async def _extract(self, documents: ApplicationDocuments) -> CandidateFacts:
        try:
            result = self._extractor.extract(documents)
            if inspect.isawaitable(result):
                result = await result
        except ExtractionError:
            raise
        except Exception as exc:  # noqa: BLE001
            self._logger.error("extraction.failed", error=str(exc))
            raise ExtractionError(f"Fact extraction failed: {exc}") from exc
        if isinstance(result, CandidateFacts):
            return result
        if result is None:
            return CandidateFacts()
        try:
            return CandidateFacts.model_validate(result)
        except PydanticValidationError as exc:
            raise ExtractionError(f"Extractor returned invalid facts: {exc}") from exc

    def _feedback(self, evaluation: RuleEvaluation) -> str | None:
        if evaluation.satisfied:
            return None
        return self._separator.join(evaluation.reasons)
