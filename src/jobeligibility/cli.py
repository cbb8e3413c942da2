"""Typer CLI entrypoint for the eligibility pipeline."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import load_config_file
from .container import create_container
from .logging import configure_logging
from .pipeline import EligibilityReport
from .schemas import AppConfig

app = typer.Typer(help="Job eligibility evaluation CLI.")


def _load_app_config(path: Optional[Path]) -> AppConfig:
    if path is None:
        return AppConfig()
    try:
        return load_config_file(path)
    except (TypeError, ValidationError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Invalid config file: {exc}", param_hint="'--config'") from exc


@app.command()
def run(
    possession: Optional[List[str]] = typer.Option(
        None,
        "--possession",
        "-p",
        help="Item the candidate possesses. Repeat for several items.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Evaluate the candidate against every company."""
    app_config = _load_app_config(config)
    configure_logging(
        log_level or app_config.logging.level,
        json_logs=app_config.logging.json_logs,
    )

    container = create_container(settings=app_config.to_settings())
    possessions = list(possession) if possession else container.default_possessions()
    report = container.pipeline().run(possessions)

    if as_json:
        typer.echo(json.dumps(asdict(report), ensure_ascii=False, indent=2))
    else:
        typer.echo(render_report(report))


@app.command()
def companies() -> None:
    """List the companies and their requirements."""
    container = create_container()
    for company in container.pipeline().companies():
        typer.echo(f"{company.name:<12}: {company.requirement_description()}")


def render_report(report: EligibilityReport) -> str:
    lines = [
        "=== Job Eligibility Evaluation System ===",
        "",
        f"Candidate Possessions: {', '.join(report.possessions) or '(none)'}",
        f"Total Companies: {len(report.outcomes)}",
        "",
        "=== ELIGIBILITY RESULTS ===",
    ]
    for outcome in report.outcomes:
        status = "✓ CAN WORK" if outcome.eligible else "✗ CANNOT WORK"
        lines.append(f"{outcome.company:<12}: {status}")

    lines += [
        "",
        "=== SUMMARY ===",
        f"Eligible Companies: {report.eligible_count}",
        f"Ineligible Companies: {report.ineligible_count}",
        f"Success Rate: {report.success_rate:.1f}%",
        "",
        "=== DETAILED ANALYSIS ===",
        "",
        "--- ELIGIBLE COMPANIES ---",
    ]
    for outcome in report.eligible:
        lines.append(f"{outcome.company:<12}: Requirements: {outcome.requirement_description}")
    lines += ["", "--- INELIGIBLE COMPANIES ---"]
    for outcome in report.ineligible:
        lines.append(f"{outcome.company:<12}: Requirements: {outcome.requirement_description}")
    lines += ["", "--- MISSING REQUIREMENTS ANALYSIS ---"]
    # items of the tree the candidate lacks; OR branches list every unheld option
    for outcome in report.ineligible:
        lines.append(f"{outcome.company:<12}: Missing items: {', '.join(outcome.missing_items)}")
    return "\n".join(lines)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
