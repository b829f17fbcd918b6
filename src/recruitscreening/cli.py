"""Typer CLI entrypoint for rule evaluation and batch screening."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

import typer
from dependency_injector import providers
from pydantic import ValidationError as PydanticValidationError

from .config import load_config_file, read_yaml
from .container import create_container
from .core import evaluate as evaluate_rules
from .errors import ScreeningError
from .logging import configure_logging
from .pipeline import AuditLogger
from .schemas import CandidateFacts, parse_rules
from .schemas.config import AppConfig

app = typer.Typer(help="Vacancy eligibility screening CLI.")


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        try:
            return json.load(handle)
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"{path.name}: invalid JSON ({exc})") from exc


@app.command()
def evaluate(
    rules: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Requirement rules JSON array."),
    facts: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidate facts JSON object."),
) -> None:
    """Evaluate rules against facts and print the verdict."""
    try:
        parsed_rules = parse_rules(_read_json(rules))
        parsed_facts = CandidateFacts.model_validate(_read_json(facts))
    except PydanticValidationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    result = evaluate_rules(parsed_rules, parsed_facts)
    typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))


@app.command()
def screen(
    vacancy: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Vacancy JSON path."),
    applications: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Applications JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Register a vacancy and decide every application in a JSONL file."""
    app_config = AppConfig()
    if config:
        if not isinstance(read_yaml(config) or {}, dict):
            raise typer.BadParameter("Config file must be a YAML object", param_name="config")
        try:
            app_config = load_config_file(config)
        except PydanticValidationError as exc:
            raise typer.BadParameter(str(exc), param_name="config") from exc

    configure_logging(log_level or app_config.logging.level, app_config.logging.renderer)

    container = create_container(settings=app_config.to_settings())
    if audit_log:
        container.audit_logger.override(providers.Object(AuditLogger(audit_log)))
    pipeline = container.pipeline()

    try:
        results = asyncio.run(
            pipeline.run_batch(
                vacancy_path=vacancy,
                applications_path=applications,
                output_path=output,
            )
        )
    except ScreeningError as exc:
        typer.echo(f"Screening failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    accepted = sum(1 for item in results if item["status"] == "accepted")
    typer.echo(
        f"Processed {len(results)} applications ({accepted} accepted). Results saved to {output}."
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
