"""Fact extraction collaborators."""

from __future__ import annotations

from typing import Awaitable, Protocol, runtime_checkable

from ..schemas import ApplicationDocuments, CandidateFacts
from .mock import DEFAULT_FACTS, MockFactExtractor


@runtime_checkable
class FactExtractor(Protocol):
    """Produce candidate facts from submitted evidence.

    Implementations may be synchronous or return an awaitable; OCR-backed
    extractors are expected to be asynchronous and own their timeouts.
    """

    def extract(
        self, documents: ApplicationDocuments
    ) -> CandidateFacts | Awaitable[CandidateFacts]:
        """Return facts for ``documents``."""


__all__ = ["FactExtractor", "MockFactExtractor", "DEFAULT_FACTS"]
