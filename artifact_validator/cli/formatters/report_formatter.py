from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from artifact_validator.application.artifact_scanner import ScanResult
from artifact_validator.cli.theme import theme
from artifact_validator.domain.entities import ValidationReport, Violation
from artifact_validator.domain.value_objects import Severity

SEVERITY_STYLES = {
    Severity.ERROR: theme.ERROR_BOLD,
    Severity.WARNING: theme.WARNING_BOLD,
}


def _location(violation: Violation) -> str:
    if violation.index is None:
        return violation.file
    return f"{violation.file}:{violation.index}"


def violations_table(report: ValidationReport, title: str | None = None) -> Table:
    # Cells are Text so paths and messages are never read as markup
    table = Table(title=Text(title) if title else None, show_lines=False)
    table.add_column("Severity")
    table.add_column("Location", style=theme.TABLE_LOCATION)
    table.add_column("Field", style=theme.TABLE_FIELD)
    table.add_column("Kind", style=theme.TABLE_KIND)
    table.add_column("Message")

    for violation in report.violations:
        table.add_row(
            Text(violation.severity.value, style=SEVERITY_STYLES[violation.severity]),
            Text(_location(violation)),
            Text(violation.field or "-"),
            violation.kind.value,
            Text(violation.message),
        )
    return table


def format_report(console: Console, report: ValidationReport, target: str) -> None:
    errors = len(report.errors)
    warnings = len(report.warnings)

    if not report.violations:
        console.print(Text(f"✅ {target}: valid", style=theme.SUCCESS_BOLD))
        return

    console.print(violations_table(report, title=target))
    if report.is_valid:
        console.print(
            Text(f"⚠️  {target}: valid with {warnings} warning(s)", style=theme.WARNING_BOLD)
        )
    else:
        console.print(
            Text(f"❌ {target}: {errors} error(s), {warnings} warning(s)", style=theme.ERROR_BOLD)
        )


def format_scan(console: Console, result: ScanResult) -> None:
    table = Table(title=Text(f"Artifacts under {result.root}"))
    table.add_column("Test", style=theme.TABLE_LOCATION)
    table.add_column("Status")
    table.add_column("Errors", justify="right")
    table.add_column("Warnings", justify="right")

    for entry in result.entries:
        if entry.io_error is not None:
            table.add_row(Text(entry.test_id), Text("unreadable", style=theme.ERROR_BOLD), "-", "-")
            continue
        report = entry.report or ValidationReport()
        status = (
            Text("valid", style=theme.SUCCESS)
            if report.is_valid
            else Text("invalid", style=theme.ERROR)
        )
        table.add_row(
            Text(entry.test_id), status, str(len(report.errors)), str(len(report.warnings))
        )

    console.print(table)
    console.print(
        Text(
            f"Filter: {result.artifact_filter.describe()}; "
            f"{len(result.entries)} checked, {result.skipped} skipped",
            style=theme.DIM,
        )
    )

    for entry in result.failed:
        if entry.io_error is not None:
            console.print(Text(f"{entry.test_id}: {entry.io_error}", style=theme.ERROR))
        elif entry.report is not None:
            console.print(violations_table(entry.report, title=entry.test_id))

    if result.is_valid:
        console.print(
            Text(f"✅ All {len(result.entries)} test(s) valid", style=theme.SUCCESS_BOLD)
        )
    else:
        console.print(
            Text(
                f"❌ {len(result.failed)} of {len(result.entries)} test(s) failed",
                style=theme.ERROR_BOLD,
            )
        )


def format_io_failure(console: Console, message: str) -> None:
    body = Text.assemble(("Validation could not run.", "bold"), "\n\n", message)
    console.print(Panel(body, title="I/O failure", border_style=theme.BORDER_ERROR))
