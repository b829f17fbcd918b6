"""Dependency injection container for the screening system."""

from __future__ import annotations

from pathlib import Path

from dependency_injector import containers, providers

from .core import DecisionAssembler, RuleEvaluator
from .extraction import MockFactExtractor
from .pipeline import RecruitmentPipeline
from .schemas import CandidateFacts
from .store import InMemoryStore, JsonlStore


class ScreeningContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    audit_logger = providers.Object(None)

    store = providers.Singleton(InMemoryStore)

    extractor = providers.Singleton(MockFactExtractor)

    rule_evaluator = providers.Singleton(RuleEvaluator)

    assembler = providers.Singleton(
        DecisionAssembler,
        store=store,
        extractor=extractor,
        evaluator=rule_evaluator,
        feedback_separator=config.feedback_separator,
        audit_logger=audit_logger,
    )

    pipeline = providers.Factory(
        RecruitmentPipeline,
        store=store,
        assembler=assembler,
    )


def create_container(*, settings: dict | None = None) -> ScreeningContainer:
    """Instantiate container with optional overrides."""

    container = ScreeningContainer()

    if not settings:
        return container

    pipeline_settings = settings.get("pipeline", {}) if isinstance(settings, dict) else {}
    if pipeline_settings:
        container.config.override(pipeline_settings)

    extraction_settings = settings.get("extraction", {}) if isinstance(settings, dict) else {}
    if extraction_settings.get("defaults") is not None:
        defaults = CandidateFacts.model_validate(extraction_settings["defaults"])
        container.extractor.override(providers.Singleton(MockFactExtractor, defaults=defaults))

    store_settings = settings.get("store", {}) if isinstance(settings, dict) else {}
    if store_settings.get("backend") == "jsonl":
        directory = Path(store_settings.get("path") or ".recruitscreening")
        container.store.override(providers.Singleton(JsonlStore, directory))

    return container
