"""Pydantic configuration schema for YAML input."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .application import CandidateFacts


class PipelineConfig(BaseModel):
    feedback_separator: str | None = None


class ExtractionConfig(BaseModel):
    defaults: CandidateFacts | None = None


class StoreConfig(BaseModel):
    backend: Literal["memory", "jsonl"] = "memory"
    path: str | None = None

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    level: str = "INFO"
    renderer: Literal["json", "console"] = "json"


class AppConfig(BaseModel):
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        pipeline_settings = self.pipeline.model_dump(exclude_none=True)
        if pipeline_settings:
            settings["pipeline"] = pipeline_settings
        if self.extraction.defaults is not None:
            settings["extraction"] = {
                "defaults": self.extraction.defaults.model_dump(mode="python")
            }
        if self.store.backend != "memory":
            settings["store"] = self.store.model_dump(exclude_none=True)
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
