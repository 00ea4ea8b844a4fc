from artifact_validator.cli.formatters.report_formatter import (
    SEVERITY_STYLES,
    format_io_failure,
    format_report,
    format_scan,
    violations_table,
)

__all__ = [
    "SEVERITY_STYLES",
    "format_io_failure",
    "format_report",
    "format_scan",
    "violations_table",
]
