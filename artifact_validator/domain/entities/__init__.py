from artifact_validator.domain.entities.file_entry import FileEntry
from artifact_validator.domain.entities.run_event import (
    RUN_EVENT_ADAPTER,
    CommandEvent,
    RunEvent,
    SnapshotEvent,
)
from artifact_validator.domain.entities.summary import Summary
from artifact_validator.domain.entities.validation_report import (
    ReportBuilder,
    ValidationReport,
    Violation,
)

__all__ = [
    "CommandEvent",
    "FileEntry",
    "ReportBuilder",
    "RUN_EVENT_ADAPTER",
    "RunEvent",
    "SnapshotEvent",
    "Summary",
    "ValidationReport",
    "Violation",
]
