"""Error taxonomy for the screening pipeline.

Business rejections are not errors: unmet rules produce a rejected
Application. Only malformed input, unknown vacancies and collaborator
failures are raised.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError


class ScreeningError(Exception):
    """Base class for every error raised by the package."""


class ValidationError(ScreeningError):
    """Malformed rule, vacancy or application request."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_pydantic(cls, subject: str, exc: PydanticValidationError) -> "ValidationError":
        details = exc.errors(include_url=False, include_context=False, include_input=False)
        return cls(f"Invalid {subject}: {exc.error_count()} error(s)", details)

    def __str__(self) -> str:  # pragma: no cover - trivial
        if not self.errors:
            return self.args[0]
        locations = ", ".join(
            ".".join(str(part) for part in error.get("loc", ())) or "<root>"
            for error in self.errors
        )
        return f"{self.args[0]} ({locations})"


class NotFoundError(ScreeningError):
    """A referenced entity does not exist."""

    def __init__(self, kind: str, entity_id: str):
        super().__init__(f"{kind} not found: {entity_id!r}")
        self.kind = kind
        self.entity_id = entity_id


class InternalError(ScreeningError):
    """Collaborator failure that aborts the pipeline."""


class StoreError(InternalError):
    """The store could not persist or read an entity."""


class ExtractionError(InternalError):
    """Fact extraction failed for the submitted documents."""


__all__ = [
    "ScreeningError",
    "ValidationError",
    "NotFoundError",
    "InternalError",
    "StoreError",
    "ExtractionError",
]
