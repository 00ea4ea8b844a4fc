import asyncio
from pathlib import Path

import typer
from rich.console import Console

from artifact_validator.application.artifact_scanner import (
    ArtifactFilter,
    ArtifactScanner,
    ScanResult,
)
from artifact_validator.application.dto.harness_settings import (
    ARTIFACTS_ENV,
    PRESERVE_ENV,
    HarnessSettings,
)
from artifact_validator.cli.formatters.report_formatter import format_io_failure, format_scan
from artifact_validator.cli.theme import theme
from artifact_validator.domain.ports.artifact_source_port import IoFailure

console = Console()


def scan_exit_code(result: ScanResult, strict: bool) -> int:
    if not result.is_valid:
        return 1
    if strict and any(entry.report and entry.report.warnings for entry in result.entries):
        return 1
    return 0


def scan_artifacts(
    ctx: typer.Context,
    root: Path | None = typer.Argument(
        None, help="Artifact root (defaults to $HARNESS_ARTIFACTS_DIR or target/test-artifacts)"
    ),
    include: list[str] | None = typer.Option(
        None, "--include", "-i", help="Only scan suite/test ids matching this glob"
    ),
    exclude: list[str] | None = typer.Option(
        None, "--exclude", "-x", help="Skip suite/test ids matching this glob"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the scan result as JSON"),
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as failures"),
) -> None:
    """Validate every <suite>/<test> directory under an artifact root."""
    settings = ctx.obj if isinstance(ctx.obj, HarnessSettings) else HarnessSettings.from_env()
    artifact_filter = ArtifactFilter(include=tuple(include or ()), exclude=tuple(exclude or ()))
    result = _scan(root or settings.artifacts_dir, artifact_filter, settings)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        format_scan(console, result)
        if not result.entries and not settings.preserve_artifacts:
            console.print(
                f"[{theme.DIM}]{PRESERVE_ENV} is off; artifacts of passing tests "
                "may already have been removed.[/]"
            )

    code = scan_exit_code(result, strict)
    if code:
        raise typer.Exit(code)


def _scan(root: Path, artifact_filter: ArtifactFilter, settings: HarnessSettings) -> ScanResult:
    try:
        return asyncio.run(ArtifactScanner().scan(root, artifact_filter))
    except IoFailure as e:
        format_io_failure(console, str(e))
        if not settings.artifacts_enabled:
            console.print(
                f"[{theme.DIM}]{ARTIFACTS_ENV} is not enabled; "
                "the harness may not have written any artifacts.[/]"
            )
        raise typer.Exit(2) from e
