"""Deterministic stand-in for document verification."""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from ..schemas import ApplicationDocuments, CandidateFacts

DEFAULT_FACTS = CandidateFacts(
    degree="BSc",
    gpa=3.2,
    institution="AAU",
    age=25,
    graduation_date="2022-07-01",
)


class MockFactExtractor:
    """Pass pre-parsed facts through, otherwise return fixed defaults."""

    def __init__(self, *, defaults: CandidateFacts | Mapping[str, Any] | None = None) -> None:
        if defaults is None:
            self._defaults = DEFAULT_FACTS
        elif isinstance(defaults, CandidateFacts):
            self._defaults = defaults
        else:
            self._defaults = CandidateFacts.model_validate(dict(defaults))
        self._logger = structlog.get_logger(__name__)

    async def extract(self, documents: ApplicationDocuments) -> CandidateFacts:
        if documents.parsed is not None:
            return documents.parsed
        self._logger.debug("extraction.defaults_used")
        return self._defaults
