from collections.abc import Callable
from pathlib import Path

import typer
from rich.console import Console

from artifact_validator.application.validator_facade import ArtifactValidator
from artifact_validator.cli.formatters.report_formatter import format_io_failure, format_report
from artifact_validator.domain.entities import ValidationReport
from artifact_validator.domain.ports.artifact_source_port import IoFailure

console = Console()

JSON_OPTION = typer.Option(False, "--json", help="Print the report as JSON")
STRICT_OPTION = typer.Option(False, "--strict", help="Treat warnings as failures")


def report_exit_code(report: ValidationReport, strict: bool) -> int:
    if not report.is_valid:
        return 1
    if strict and report.warnings:
        return 1
    return 0


def _run(
    target: str,
    validate: Callable[[], ValidationReport],
    as_json: bool,
    strict: bool,
) -> None:
    try:
        report = validate()
    except IoFailure as e:
        format_io_failure(console, str(e))
        raise typer.Exit(2) from e

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        format_report(console, report, target)

    code = report_exit_code(report, strict)
    if code:
        raise typer.Exit(code)


def validate_events(
    path: Path = typer.Argument(..., help="Path to events.jsonl"),
    as_json: bool = JSON_OPTION,
    strict: bool = STRICT_OPTION,
) -> None:
    """Validate an events.jsonl file."""
    validator = ArtifactValidator()
    _run(str(path), lambda: validator.validate_events(path), as_json, strict)


def validate_snapshot(
    path: Path = typer.Argument(..., help="Path to a *.snapshot.json file"),
    as_json: bool = JSON_OPTION,
    strict: bool = STRICT_OPTION,
) -> None:
    """Validate a file-tree snapshot."""
    validator = ArtifactValidator()
    _run(str(path), lambda: validator.validate_snapshot(path), as_json, strict)


def validate_summary(
    path: Path = typer.Argument(..., help="Path to summary.json"),
    events: Path | None = typer.Option(
        None, "--events", "-e", help="events.jsonl to cross-check run_count against"
    ),
    as_json: bool = JSON_OPTION,
    strict: bool = STRICT_OPTION,
) -> None:
    """Validate a run summary."""
    validator = ArtifactValidator()
    _run(str(path), lambda: validator.validate_summary(path, events), as_json, strict)


def validate_directory(
    path: Path = typer.Argument(..., help="Test artifact directory (<root>/<suite>/<test>)"),
    as_json: bool = JSON_OPTION,
    strict: bool = STRICT_OPTION,
) -> None:
    """Validate every artifact in one test directory."""
    validator = ArtifactValidator()
    _run(str(path), lambda: validator.validate_directory(path), as_json, strict)
