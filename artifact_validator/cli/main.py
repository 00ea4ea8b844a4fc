import sys
from pathlib import Path

import typer
from loguru import logger

from artifact_validator.application.dto.harness_settings import HarnessSettings
from artifact_validator.cli.commands import scan, validate


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure loguru logging."""
    logger.remove()

    if log_file is not None:
        logger.add(
            log_file,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
                "{name}:{function}:{line} - {message}"
            ),
            level="DEBUG",
            rotation="10 MB",
            encoding="utf-8",
        )

    if verbose:
        logger.add(
            sys.stderr,
            format="{time:HH:mm:ss} | {level: <8} | {message}",
            level="DEBUG",
        )


app = typer.Typer(
    name="artifact-validator",
    help="Validate end-to-end test harness artifacts (events, snapshots, summaries)",
    no_args_is_help=True,
)

# Register commands
app.command(name="events")(validate.validate_events)
app.command(name="snapshot")(validate.validate_snapshot)
app.command(name="summary")(validate.validate_summary)
app.command(name="dir")(validate.validate_directory)
app.command(name="scan")(scan.scan_artifacts)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output", is_eager=True),
    log_file: Path | None = typer.Option(None, "--log-file", help="Write debug log to this file"),
) -> None:
    """Validate end-to-end test harness artifacts."""
    setup_logging(verbose=verbose, log_file=log_file)
    ctx.obj = HarnessSettings.from_env()


if __name__ == "__main__":
    app()
